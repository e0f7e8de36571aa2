"""Telegram bot UI text constants for the expense entry flow."""

GREETING = (
    "Привет!\n\n"
    "Я записываю семейные расходы в таблицу:\n{sheet_url}\n\n"
    "➕ Добавить расход — /add\n"
    "❌ Отменить ввод — /cancel"
)
IDLE_HELP = "Чтобы добавить расход — отправь /add\n/start — справка"
ACCESS_DENIED = "Доступ запрещен."

CANCELED = "😕 Отмена. Чтобы начать заново — /add"
SESSION_EXPIRED = "💀⌛ Состояние сбилось. Начнём заново? (/add)"

ASK_DATE = "Записываю ✍️\n\nВыбери дату на календаре:\n\n❌ /cancel — отмена"
RETRY_DATE = "😵‍💫 Выбери дату на календаре (или введи DD.MM.YYYY):"

ASK_SPENDER = "Выбери, на кого потратили:"
RETRY_SPENDER = "Выбери значение кнопкой ниже, не выдумывай 😹"

ASK_CATEGORY = "Выбери категорию трат:"
RETRY_CATEGORY = "Пожалуйста, выбери категорию кнопкой ниже 😹"

ASK_AMOUNT = "Введи сумму (целое натуральное число):"
RETRY_AMOUNT = "😵‍💫 Сумма должна быть целым натуральным числом (например 300)"

ASK_COMMENT = "Введи комментарий или отправь /skip, чтобы пропустить:"

ASK_CARD = "Выбери, с чьей карты потратили:"
RETRY_CARD = "Пожалуйста, выбери карту кнопкой ниже 🫠"

SAVED = "✅ Записал в «Расходы».\n\nЧтобы добавить ещё — /add"

REFERENCE_FAILED = "💀 Что-то сломалось: не смог прочитать справочники. Попробуй ещё раз."
APPEND_FAILED = "💀 Что-то сломалось: не смог записать в «Расходы». Попробуй ещё раз."

CALENDAR_CANCEL = "❌ Отмена"
WEEKDAYS = ("Пн", "Вт", "Ср", "Чт", "Пт", "Сб", "Вс")
MONTHS = (
    "Январь",
    "Февраль",
    "Март",
    "Апрель",
    "Май",
    "Июнь",
    "Июль",
    "Август",
    "Сентябрь",
    "Октябрь",
    "Ноябрь",
    "Декабрь",
)
