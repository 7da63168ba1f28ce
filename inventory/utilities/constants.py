from typing import Final

DATE_FORMAT: Final[str] = "%d/%m/%Y"
DATE_PATTERN: Final[str] = r"^[0-9]{2}/[0-9]{2}/[0-9]{4}$"

# Category sentinel shown first in the category bar; disables filtering
ALL_CATEGORIES: Final[str] = "Todos"

SORT_KEYS: Final[tuple[str, ...]] = ("name", "quantity", "expirationDate")
SORT_DIRECTIONS: Final[tuple[str, ...]] = ("asc", "desc")
DEFAULT_SORT_KEY: Final[str] = "name"
DEFAULT_SORT_DIRECTION: Final[str] = "asc"

CSV_HEADERS: Final[tuple[str, ...]] = (
    "ID",
    "Nome",
    "Quantidade",
    "Preco",
    "Validade",
    "Categoria",
    "AlertaEstoqueBaixo",
)
EXPORT_FILENAME_PREFIX: Final[str] = "inventario_"

CURRENCY_PREFIX: Final[str] = "R$"

SHARE_UNAVAILABLE_NOTICE: Final[str] = "Compartilhamento não disponível neste dispositivo."
EXPORT_FAILED_NOTICE: Final[str] = "Ocorreu um erro ao exportar os dados."
SAVE_FAILED_NOTICE: Final[str] = "Não foi possível salvar as alterações do inventário."
