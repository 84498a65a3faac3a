from aiogram.types import ReplyKeyboardMarkup, KeyboardButton

def main_kb() -> ReplyKeyboardMarkup:
    return ReplyKeyboardMarkup(
        keyboard=[
            [KeyboardButton(text="/products"), KeyboardButton(text="/cart")],
            [KeyboardButton(text="/order"), KeyboardButton(text="/reload")],
            [KeyboardButton(text="/seed"), KeyboardButton(text="/help")],
        ],
        resize_keyboard=True,
    )
