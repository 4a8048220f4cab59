from __future__ import annotations

from html import escape

from aiogram import F, Router
from aiogram.filters import Command
from aiogram.types import CallbackQuery, Message

from splitshare.config import get_settings
from splitshare.keyboards import confirm_delete_keyboard
from splitshare.logging import get_logger
from splitshare.services.report import format_expense_list
from splitshare.services.validation import MissingFieldsError, ValidationError
from splitshare.state import state
from splitshare.utils.parse import EXPENSE_USAGE, command_args, parse_expense_command

expenses_router = Router()
log = get_logger(__name__)


def build_expenses_message(chat_id: int) -> str:
    return format_expense_list(state.people(chat_id), state.expenses(chat_id))


def _extract_expense_id(text: str) -> int | None:
    try:
        return int(command_args(text))
    except ValueError:
        return None


@expenses_router.message(Command("addexpense"))
async def cmd_addexpense(message: Message) -> None:
    if not message.text:
        return
    chat_id = message.chat.id
    args = command_args(message.text)
    if not args:
        await message.answer(EXPENSE_USAGE)
        return

    try:
        draft = parse_expense_command(args, state.people(chat_id), get_settings().today())
        expense = state.add_expense(chat_id, draft)
    except MissingFieldsError as exc:
        log.info("expense.rejected", chat_id=chat_id, missing=exc.fields)
        details = "\n".join(f"• {escape(field)}" for field in exc.fields)
        await message.answer(f"⚠️ Missing required details:\n\n{details}")
        return
    except ValidationError as exc:
        log.info("expense.rejected", chat_id=chat_id, reason=str(exc))
        await message.answer(f"🚫 {escape(str(exc))}")
        return
    except ValueError as exc:
        log.info("expense.rejected", chat_id=chat_id, reason=str(exc))
        await message.answer(escape(str(exc)))
        return

    await message.answer(
        f"Expense added: #{expense.id} {escape(expense.description)} — {expense.amount:.2f} 🎉"
    )


@expenses_router.message(Command("expenses"))
async def cmd_expenses(message: Message) -> None:
    await message.answer(build_expenses_message(message.chat.id))


@expenses_router.message(Command("delexpense"))
async def cmd_delexpense(message: Message) -> None:
    if not message.text:
        return
    expense_id = _extract_expense_id(message.text)
    if expense_id is None:
        await message.answer("Usage: /delexpense [id]")
        return

    expense = state.get_expense(message.chat.id, expense_id)
    if expense is None:
        await message.answer("Expense not found")
        return

    await message.answer(
        f"Delete expense #{expense.id} {escape(expense.description)}? This cannot be undone.",
        reply_markup=confirm_delete_keyboard(expense.id),
    )


@expenses_router.callback_query(F.data.startswith("delexpense:"))
async def cb_delexpense(callback: CallbackQuery) -> None:
    _, decision, raw_id = callback.data.split(":")
    chat_id = callback.message.chat.id

    if decision != "yes":
        await callback.message.edit_text("Deletion cancelled.")
        await callback.answer()
        return

    try:
        expense = state.remove_expense(chat_id, int(raw_id))
    except KeyError:
        await callback.message.edit_text("Expense not found. It may already be deleted.")
        await callback.answer()
        return

    await callback.message.edit_text(f"Expense #{expense.id} {escape(expense.description)} deleted.")
    await callback.answer("Deleted")
