"""Default rows loaded into a fresh machine database."""

from vendingmachine.core.models import ChangeRow, ItemRow

DEFAULT_CHANGE_QUANTITY = 100

DEFAULT_CHANGE: tuple[ChangeRow, ...] = tuple(
    ChangeRow(denomination=denomination, quantity=DEFAULT_CHANGE_QUANTITY)
    for denomination in ("1p", "2p", "5p", "10p", "20p", "50p", "£1", "£2")
)

DEFAULT_ITEMS: tuple[ItemRow, ...] = (
    ItemRow(name="Toilet Roll", quantity=2),
    ItemRow(name="Canned Tomatoes", quantity=0),
    ItemRow(name="Sainsburys Lager", quantity=5),
)
