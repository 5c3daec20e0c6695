# Inquiry Service: prefilled booking message for the chat hand-off
# Built only from a bookable quote; labels come from config tables.

from urllib.parse import quote as url_quote

from config import CURRENCY_LABEL, ROOM_LABELS, TIER_LABELS, WHATSAPP_NUMBER
from models.schemas import Program, Quote

# Left unescaped in addition to quote()'s defaults, as in encodeURIComponent
_URI_SAFE = "!*'()"


class InquiryError(ValueError):
    """Raised when a quote cannot be turned into a booking inquiry."""


def _capitalize(value: str) -> str:
    return value[:1].upper() + value[1:]


def tier_label(tier: str) -> str:
    return TIER_LABELS.get(tier.lower(), _capitalize(tier))


def room_label(room: str) -> str:
    return ROOM_LABELS.get(room.lower(), _capitalize(room))


def nights_label(n: int) -> str:
    if n == 1:
        return "ليلة واحدة"
    if n == 2:
        return "ليلتين"
    if 3 <= n <= 10:
        return f"{n} ليالي"
    return f"{n} ليلة"


def days_label(n: int) -> str:
    if n == 1:
        return "يوم واحد"
    if n == 2:
        return "يومين"
    if 3 <= n <= 10:
        return f"{n} أيام"
    return f"{n} يوم"


def _fmt_price(price: float) -> str:
    return str(int(price)) if float(price).is_integer() else f"{price:.2f}"


def compose_inquiry(program: Program, quote: Quote) -> str:
    if not quote.bookable or quote.price is None or not quote.room_type:
        raise InquiryError(f"quote is not bookable (status: {quote.status})")

    hotel_lines = "\n".join(
        f"- {loc.label}: {quote.selected_hotels.get(loc.name, '')}"
        for loc in program.locations
    )

    return (
        f"مرحبا! أود حجز {program.title}.\n\n"
        f"تفاصيل الباقة:\n"
        f"- الفئة: {tier_label(quote.tier)}\n"
        f"- نوع الغرفة: {room_label(quote.room_type)}\n"
        f"{hotel_lines}\n"
        f"- المدة: {nights_label(program.nights)} و {days_label(program.days)}\n"
        f"- السعر: {_fmt_price(quote.price)} {CURRENCY_LABEL}\n\n"
        f"الرجاء تزويدي بمزيد من التفاصيل حول التوافر وعملية الحجز."
    )


def inquiry_link(message: str, number: str = WHATSAPP_NUMBER) -> str:
    return f"https://wa.me/{number}?text={url_quote(message, safe=_URI_SAFE)}"
