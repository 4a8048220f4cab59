from __future__ import annotations

from aiogram import F, Router
from aiogram.filters import Command, CommandStart
from aiogram.types import CallbackQuery, Message

from splitshare.handlers.balances import build_balances_message, build_settle_message
from splitshare.handlers.expenses import build_expenses_message
from splitshare.handlers.people import build_people_message
from splitshare.keyboards import back_keyboard, main_menu_keyboard
from splitshare.state import state

basic_router = Router()

WELCOME_TEXT = (
    "👋 Hi! I'm <b>SplitShare</b>. I keep track of shared expenses in this chat "
    "and tell you who owes whom.\n\n"
    "Choose an action:"
)

HELP_TEXT = (
    "<b>📖 Commands</b>\n\n"
    "<b>People:</b>\n"
    "/addperson [name] - add someone to the group\n"
    "/removeperson [name] - remove someone with no expenses\n"
    "/people - list the group\n\n"
    "<b>Expenses:</b>\n"
    "/addexpense - record an expense\n"
    "/expenses - expense history\n"
    "/delexpense [id] - delete an expense\n\n"
    "<b>Results:</b>\n"
    "/balances - net balance per person\n"
    "/settle - suggested settlements\n"
    "/debts - who owes whom per expense\n"
    "/reset - forget everything in this chat\n\n"
    "<b>Expense format:</b>\n"
    "• /addexpense Lunch | 30 | Alice | Alice, Bob, Charlie | 2024-01-01\n"
    "• /addexpense Dinner | 100 | Alice | Alice=20, Bob=30, Charlie=50\n"
    "• /addexpense Taxi | 45 | Bob | all"
)


@basic_router.message(CommandStart())
async def cmd_start(message: Message) -> None:
    await message.answer(WELCOME_TEXT, reply_markup=main_menu_keyboard())


@basic_router.message(Command("help"))
async def cmd_help(message: Message) -> None:
    await message.answer(HELP_TEXT)


@basic_router.message(Command("reset"))
async def cmd_reset(message: Message) -> None:
    state.clear(message.chat.id)
    await message.answer("Everything in this chat was cleared.")


@basic_router.callback_query(F.data == "menu:main")
async def cb_main_menu(callback: CallbackQuery) -> None:
    await callback.message.edit_text(WELCOME_TEXT, reply_markup=main_menu_keyboard())
    await callback.answer()


@basic_router.callback_query(F.data.startswith("menu:"))
async def cb_menu(callback: CallbackQuery) -> None:
    """Sections of the main menu"""
    chat_id = callback.message.chat.id
    section = callback.data.split(":", 1)[1]
    builders = {
        "people": build_people_message,
        "expenses": build_expenses_message,
        "balances": build_balances_message,
        "settle": build_settle_message,
    }
    if section == "help":
        text = HELP_TEXT
    elif section in builders:
        text = builders[section](chat_id)
    else:
        await callback.answer("Unknown action")
        return

    await callback.message.edit_text(text, reply_markup=back_keyboard())
    await callback.answer()
