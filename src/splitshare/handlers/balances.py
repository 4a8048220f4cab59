from __future__ import annotations

from aiogram import Router
from aiogram.filters import Command
from aiogram.types import Message

from splitshare.logging import get_logger
from splitshare.services.balances import calculate_balances, direct_debts
from splitshare.services.report import format_balances, format_direct_debts, format_settlements
from splitshare.services.settlement import simplify_debts
from splitshare.state import state

balances_router = Router()
log = get_logger(__name__)


def build_balances_message(chat_id: int) -> str:
    people = state.people(chat_id)
    expenses = state.expenses(chat_id)
    balances = calculate_balances(people, expenses)
    return format_balances(people, expenses, balances)


def build_settle_message(chat_id: int) -> str:
    people = state.people(chat_id)
    balances = calculate_balances(people, state.expenses(chat_id))
    settlements = simplify_debts(balances)
    log.info("settle.computed", chat_id=chat_id, transfers=len(settlements))
    return format_settlements(people, settlements)


@balances_router.message(Command("balances"))
async def cmd_balances(message: Message) -> None:
    await message.answer(build_balances_message(message.chat.id))


@balances_router.message(Command("settle"))
async def cmd_settle(message: Message) -> None:
    await message.answer(build_settle_message(message.chat.id))


@balances_router.message(Command("debts"))
async def cmd_debts(message: Message) -> None:
    chat_id = message.chat.id
    debts = direct_debts(state.expenses(chat_id))
    await message.answer(format_direct_debts(state.people(chat_id), debts))
