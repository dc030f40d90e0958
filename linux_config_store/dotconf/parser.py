"""Parser ligne à ligne du format INI du store.

Le parser ne s'interrompt jamais sur un contenu mal formé : chaque
ligne rejetée produit un ParseWarning, collecté dans le ParseReport
retourné et envoyé au logger. Le résultat du parsing est le même
que les diagnostics soient consultés ou non.
"""

import io
from dataclasses import dataclass, field
from enum import Enum
from typing import BinaryIO, Optional, Protocol

from linux_config_store.config.settings import StoreSettings
from linux_config_store.dotconf.accessors import WHITESPACE
from linux_config_store.dotconf.model import COMMENT_PREFIX
from linux_config_store.logging.base import Logger
from linux_config_store.logging.standard_logger import StandardLogger

SECTION_OPEN = "["
SECTION_CLOSE = "]"
SEPARATOR = "="
# Seul saut de ligne pouvant subsister après le découpage sur \n
CARRIAGE_RETURN = "\r"


class WarningKind(Enum):
    """Raisons pour lesquelles une ligne est ignorée."""

    LINE_TOO_LONG = "line_too_long"
    UNTERMINATED_SECTION = "unterminated_section"
    SKIPPED_ENTRY = "skipped_entry"
    MISSING_SEPARATOR = "missing_separator"
    EMPTY_KEY = "empty_key"
    CARRIAGE_RETURN = "carriage_return"


_MESSAGES = {
    WarningKind.LINE_TOO_LONG: "ligne trop longue ignorée",
    WarningKind.UNTERMINATED_SECTION: "nom de section non terminé",
    WarningKind.SKIPPED_ENTRY: "entrée ignorée suite à une section invalide",
    WarningKind.MISSING_SEPARATOR: "aucun séparateur clé/valeur",
    WarningKind.EMPTY_KEY: "clé vide",
    WarningKind.CARRIAGE_RETURN: "retour chariot dans un nom",
}


@dataclass(frozen=True)
class ParseWarning:
    """Ligne rejetée par le parser.

    Attributes:
        line_number: Numéro de ligne (à partir de 1).
        kind: Raison du rejet.
    """

    line_number: int
    kind: WarningKind

    @property
    def message(self) -> str:
        return f"ligne {self.line_number} : {_MESSAGES[self.kind]}"


@dataclass
class ParseReport:
    """Bilan d'un parsing : lignes lues et avertissements."""

    lines: int = 0
    warnings: list[ParseWarning] = field(default_factory=list)

    @property
    def clean(self) -> bool:
        return not self.warnings

    def of_kind(self, kind: WarningKind) -> list[ParseWarning]:
        return [w for w in self.warnings if w.kind == kind]


class StoreTarget(Protocol):
    """Ce dont le parser a besoin du store qu'il remplit."""

    def set_string(self, section: str, key: str, value: str) -> None: ...

    def add_comment(self, text: str) -> bool: ...


def trim(text: str) -> str:
    """Retire les blancs ASCII en tête et en fin."""
    return text.strip(WHITESPACE)


class IniStoreParser:
    """Machine à états mono-passe alimentant un store.

    Example:
        >>> store = ConfigStore()
        >>> report = IniStoreParser().parse_string("[Bad\\nk = v\\n", store)
        >>> store.has_key("Global", "k"), len(report.warnings)
        (False, 2)
    """

    def __init__(
        self,
        logger: Optional[Logger] = None,
        settings: Optional[StoreSettings] = None,
    ) -> None:
        """
        Initialise le parser.

        Args:
            logger: Puits des avertissements (StandardLogger par défaut)
            settings: Section par défaut et longueur de ligne maximale
        """
        self.logger = logger or StandardLogger()
        self.settings = settings or StoreSettings()

    def parse(self, stream: BinaryIO, store: StoreTarget) -> ParseReport:
        """Lit le flux jusqu'à la fin et alimente le store.

        Args:
            stream: Flux binaire ouvert en lecture (décodé en UTF-8).
            store: Store à remplir.

        Returns:
            Bilan du parsing.
        """
        report = ParseReport()
        limit = self.settings.max_line_length
        current_section = self.settings.default_section
        skip_entries = False

        while True:
            chunk = stream.readline(limit)
            if not chunk:
                break
            report.lines += 1

            if len(chunk) == limit and not chunk.endswith(b"\n"):
                self._discard_rest_of_line(stream, limit)
                self._warn(report, WarningKind.LINE_TOO_LONG)
                continue

            line = trim(chunk.decode("utf-8", errors="replace"))
            if not line:
                continue

            if line.startswith(COMMENT_PREFIX):
                if CARRIAGE_RETURN in line:
                    self._warn(report, WarningKind.CARRIAGE_RETURN)
                    continue
                store.add_comment(line)
            elif line.startswith(SECTION_OPEN):
                if len(line) < 2 or not line.endswith(SECTION_CLOSE):
                    self._warn(report, WarningKind.UNTERMINATED_SECTION)
                    skip_entries = True
                    continue
                if CARRIAGE_RETURN in line:
                    self._warn(report, WarningKind.CARRIAGE_RETURN)
                    skip_entries = True
                    continue
                current_section = line[1:-1]
                skip_entries = False
            elif skip_entries:
                self._warn(report, WarningKind.SKIPPED_ENTRY)
            elif SEPARATOR not in line:
                self._warn(report, WarningKind.MISSING_SEPARATOR)
            else:
                key, _, value = line.partition(SEPARATOR)
                key = trim(key)
                if not key:
                    self._warn(report, WarningKind.EMPTY_KEY)
                    continue
                if CARRIAGE_RETURN in key:
                    self._warn(report, WarningKind.CARRIAGE_RETURN)
                    continue
                store.set_string(current_section, key, trim(value))

        return report

    def parse_string(self, text: str, store: StoreTarget) -> ParseReport:
        """Parse un contenu déjà en mémoire."""
        return self.parse(io.BytesIO(text.encode("utf-8")), store)

    @staticmethod
    def _discard_rest_of_line(stream: BinaryIO, limit: int) -> None:
        while True:
            rest = stream.readline(limit)
            if not rest or rest.endswith(b"\n"):
                return

    def _warn(self, report: ParseReport, kind: WarningKind) -> None:
        warning = ParseWarning(report.lines, kind)
        report.warnings.append(warning)
        self.logger.log_warning(f"Parsing : {warning.message}")
