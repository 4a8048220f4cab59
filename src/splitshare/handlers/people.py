from __future__ import annotations

from html import escape

from aiogram import Router
from aiogram.filters import Command
from aiogram.types import Message

from splitshare.logging import get_logger
from splitshare.services.validation import ValidationError
from splitshare.state import state
from splitshare.utils.parse import command_args, resolve_person

people_router = Router()
log = get_logger(__name__)


def build_people_message(chat_id: int) -> str:
    people = state.people(chat_id)
    if not people:
        return "No people added yet. Use /addperson [name] to get started!"

    lines = [f"<b>👥 Current members ({len(people)})</b>"]
    lines.extend(f"• {escape(person.name)}" for person in people)
    if len(people) < 2:
        lines.append("\n⚠️ Add at least 2 people to start tracking expenses")
    return "\n".join(lines)


@people_router.message(Command("addperson"))
async def cmd_addperson(message: Message) -> None:
    if not message.text:
        return
    chat_id = message.chat.id
    try:
        person = state.add_person(chat_id, command_args(message.text))
    except ValidationError as exc:
        log.info("person.rejected", chat_id=chat_id, reason=str(exc))
        await message.answer(f"🚫 {escape(str(exc))}")
        return

    await message.answer(f"✅ {escape(person.name)} joined the group.")


@people_router.message(Command("removeperson"))
async def cmd_removeperson(message: Message) -> None:
    if not message.text:
        return
    chat_id = message.chat.id
    name = command_args(message.text)
    if not name:
        await message.answer("Usage: /removeperson [name]")
        return

    try:
        person = resolve_person(name, state.people(chat_id))
        state.remove_person(chat_id, person.id)
    except ValidationError as exc:
        log.info("person.remove_denied", chat_id=chat_id, reason=str(exc))
        await message.answer(f"⚠️ Action denied\n\n{escape(str(exc))}")
        return
    except ValueError as exc:
        log.info("person.remove_denied", chat_id=chat_id, reason=str(exc))
        await message.answer(escape(str(exc)))
        return

    await message.answer(f"{escape(person.name)} was removed from the group.")


@people_router.message(Command("people"))
async def cmd_people(message: Message) -> None:
    await message.answer(build_people_message(message.chat.id))
