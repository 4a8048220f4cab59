from __future__ import annotations

from aiogram.types import InlineKeyboardButton, InlineKeyboardMarkup


def main_menu_keyboard() -> InlineKeyboardMarkup:
    return InlineKeyboardMarkup(
        inline_keyboard=[
            [InlineKeyboardButton(text="👥 People", callback_data="menu:people")],
            [InlineKeyboardButton(text="📝 Expenses", callback_data="menu:expenses")],
            [
                InlineKeyboardButton(text="💰 Balances", callback_data="menu:balances"),
                InlineKeyboardButton(text="💸 Settle up", callback_data="menu:settle"),
            ],
            [InlineKeyboardButton(text="ℹ️ Help", callback_data="menu:help")],
        ]
    )


def back_keyboard() -> InlineKeyboardMarkup:
    return InlineKeyboardMarkup(
        inline_keyboard=[[InlineKeyboardButton(text="◀️ Back to menu", callback_data="menu:main")]]
    )


def confirm_delete_keyboard(expense_id: int) -> InlineKeyboardMarkup:
    return InlineKeyboardMarkup(
        inline_keyboard=[
            [
                InlineKeyboardButton(text="🗑 Delete", callback_data=f"delexpense:yes:{expense_id}"),
                InlineKeyboardButton(text="Cancel", callback_data=f"delexpense:no:{expense_id}"),
            ]
        ]
    )
