"""Conversions chaîne <-> scalaire au-dessus de get_string/set_string.

Format sur disque :
- entiers : décimal minimal à l'écriture ; à la lecture, décimal,
  hexadécimal (0x) ou octal (0 initial), la chaîne entière devant
  être consommée ;
- booléens : uniquement "true" et "false".

Toute valeur absente ou non convertible donne la valeur par défaut
de l'appelant.
"""

from abc import ABC, abstractmethod
from typing import Callable, Optional, TypeVar

WHITESPACE = " \t\n\v\f\r"

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1
UINT16_MAX = 2 ** 16 - 1
UINT64_MAX = 2 ** 64 - 1

TRUE_TOKEN = "true"
FALSE_TOKEN = "false"

T = TypeVar("T")

_ALPHABETS = {
    8: frozenset("01234567"),
    10: frozenset("0123456789"),
    16: frozenset("0123456789abcdefABCDEF"),
}


def parse_integer(text: str) -> Optional[int]:
    """Parse un entier avec détection de base par préfixe.

    Les espaces en tête et un signe sont acceptés ; tout caractère
    résiduel fait échouer la conversion.

    Args:
        text: Valeur stockée.

    Returns:
        L'entier lu, ou None si la chaîne n'est pas un entier complet.

    Example:
        >>> parse_integer("0x1F"), parse_integer("017"), parse_integer("12a")
        (31, 15, None)
    """
    body = text.lstrip(WHITESPACE)
    sign = 1
    if body[:1] in ("+", "-"):
        if body[0] == "-":
            sign = -1
        body = body[1:]

    if body[:2] in ("0x", "0X"):
        digits, base = body[2:], 16
    elif len(body) > 1 and body[0] == "0":
        digits, base = body[1:], 8
    else:
        digits, base = body, 10

    if not digits or not set(digits) <= _ALPHABETS[base]:
        return None
    return sign * int(digits, base)


def to_int32(value: Optional[int]) -> Optional[int]:
    if value is None or not INT32_MIN <= value <= INT32_MAX:
        return None
    return value


def to_uint64(value: Optional[int]) -> Optional[int]:
    """Ramène un entier lu dans l'espace non signé 64 bits.

    Les négatifs reviennent modulo 2**64 ; un dépassement en
    magnitude est rejeté.
    """
    if value is None or abs(value) > UINT64_MAX:
        return None
    return value % (UINT64_MAX + 1)


def to_uint16(value: Optional[int]) -> Optional[int]:
    """Garde les 16 bits de poids faible, quelle que soit la largeur lue."""
    if value is None:
        return None
    return value & UINT16_MAX


def parse_bool(text: str) -> Optional[bool]:
    if text == TRUE_TOKEN:
        return True
    if text == FALSE_TOKEN:
        return False
    return None


def format_bool(value: bool) -> str:
    return TRUE_TOKEN if value else FALSE_TOKEN


def format_integer(value: int, minimum: int, maximum: int) -> str:
    """Formate un entier en décimal après contrôle de sa plage.

    Raises:
        TypeError: Si value n'est pas un int (les bool sont refusés).
        ValueError: Si value sort de [minimum, maximum].
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Entier attendu, reçu : {value!r}")
    if not minimum <= value <= maximum:
        raise ValueError(
            f"{value} hors de la plage [{minimum}, {maximum}]"
        )
    return str(value)


class TypedAccessors(ABC):
    """Accesseurs typés pour les classes exposant get_string/set_string."""

    @abstractmethod
    def get_string(
        self, section: str, key: str, default: Optional[str]
    ) -> Optional[str]:
        pass

    @abstractmethod
    def set_string(self, section: str, key: str, value: str) -> None:
        pass

    def _get_converted(
        self,
        section: str,
        key: str,
        default: T,
        convert: Callable[[str], Optional[T]],
    ) -> T:
        raw = self.get_string(section, key, None)
        if raw is None:
            return default
        value = convert(raw)
        return default if value is None else value

    def get_int(self, section: str, key: str, default: int) -> int:
        """Lit un entier signé 32 bits."""
        return self._get_converted(
            section, key, default, lambda raw: to_int32(parse_integer(raw))
        )

    def get_uint16(self, section: str, key: str, default: int) -> int:
        """Lit un entier non signé tronqué à 16 bits."""
        return self._get_converted(
            section, key, default, lambda raw: to_uint16(parse_integer(raw))
        )

    def get_uint64(self, section: str, key: str, default: int) -> int:
        """Lit un entier non signé 64 bits."""
        return self._get_converted(
            section, key, default, lambda raw: to_uint64(parse_integer(raw))
        )

    def get_bool(self, section: str, key: str, default: bool) -> bool:
        """Lit un booléen ("true"/"false" uniquement)."""
        return self._get_converted(section, key, default, parse_bool)

    def set_int(self, section: str, key: str, value: int) -> None:
        self.set_string(
            section, key, format_integer(value, INT32_MIN, INT32_MAX)
        )

    def set_uint16(self, section: str, key: str, value: int) -> None:
        self.set_string(section, key, format_integer(value, 0, UINT16_MAX))

    def set_uint64(self, section: str, key: str, value: int) -> None:
        self.set_string(section, key, format_integer(value, 0, UINT64_MAX))

    def set_bool(self, section: str, key: str, value: bool) -> None:
        self.set_string(section, key, format_bool(value))
