"""
Recursive-descent parser for chemical formula text.

Grammar (informal)::

    formula := group ('.' group)*
    group   := mult? term+
    term    := symbol count?
             | '(' formula ')' mult?
             | '[' formula ']' mult?
             | '{' number '}' symbol
             | superscript-number symbol
             | signed-number

Digits may be plain, subscript or superscript. A leading plain number sets
the ambient multiplier for the rest of the group; ``.`` starts a new group
and resets it. A signed number (ASCII or superscript sign), or unsigned
superscript digits ending the text after an element, sets the net charge;
the last charge read wins. Stray punctuation between terms is ignored.
"""

__all__ = ["parse", "try_parse"]

from typing import Dict, Optional, Tuple

from loguru import logger

from hillform.config import (
    DEFAULT_CONFIG,
    EMPTY_TOKEN,
    MAX_CHARGE,
    MAX_COUNT,
    MIN_CHARGE,
    FormatConfig,
)
from hillform.elements.isotope import Isotope
from hillform.elements.periodic_table import PeriodicTable, default_table
from hillform.errors import FormulaParseError
from hillform.formula.model import Formula
from hillform.text.digits import Plane
from hillform.text.numbers import NumberScan, scan_number
from hillform.text.symbols import scan_symbol

_BRACKETS = {"(": ")", "[": "]"}
_MASS_OPEN = "{"
_MASS_CLOSE = "}"
_GROUP_SEPARATOR = "."


class _GroupParser:
    """
    Parse state for one group level.

    Each bracketed group is parsed by its own instance over the enclosed
    slice, and its counts are merged back into the caller explicitly.
    ``offset`` is the slice's position in the full text, used for error
    reporting only.
    """

    def __init__(
        self,
        text: str,
        table: PeriodicTable,
        config: FormatConfig,
        offset: int = 0,
    ) -> None:
        self.text = text
        self.table = table
        self.config = config
        self.offset = offset
        self.index = 0
        self.multiplier: Optional[int] = None
        self.isotope: Optional[Isotope] = None
        self.mass_number: Optional[int] = None
        self.counts: Dict[str, int] = {}
        self.charge: Optional[int] = None
        self.error: Optional[Tuple[int, str]] = None
        # an element symbol or a charge was read
        self.read_term = False

    # ------------------------------------------------------------------
    # Bookkeeping
    # ------------------------------------------------------------------

    def _fail(self, reason: str, index: Optional[int] = None) -> bool:
        position = self.offset + (self.index if index is None else index)
        self.error = (position, reason)
        return False

    def _add(self, key: str, amount: int) -> bool:
        if amount == 0:
            return True
        total = self.counts.get(key, 0) + amount
        if total > MAX_COUNT:
            return self._fail(f"count of {key} exceeds {MAX_COUNT}")
        self.counts[key] = total
        return True

    def _flush(self) -> bool:
        """Record the pending isotope once, scaled by the ambient multiplier."""
        if self.isotope is None:
            return True
        isotope, self.isotope = self.isotope, None
        return self._add(isotope.key, 1 if self.multiplier is None else self.multiplier)

    def _set_charge(self, value: int) -> bool:
        if not MIN_CHARGE <= value <= MAX_CHARGE:
            return self._fail(f"charge {value} out of range")
        self.charge = value
        self.read_term = True
        return True

    @property
    def _at_end(self) -> bool:
        return self.index >= len(self.text)

    # ------------------------------------------------------------------
    # Productions
    # ------------------------------------------------------------------

    def run(self) -> bool:
        text = self.text
        start_group = True
        while self.index < len(text):
            if start_group:
                start_group = False
                scan = scan_number(text, self.index, self.config)
                if scan is not None and scan.plane is Plane.NORMAL and not scan.charge:
                    if scan.value > MAX_COUNT:
                        return self._fail(f"multiplier {scan.value} exceeds {MAX_COUNT}")
                    self.multiplier = scan.value
                    self.index = scan.end
                    continue

            char = text[self.index]
            if char == _GROUP_SEPARATOR:
                if not self._flush():
                    return False
                self.multiplier = None
                start_group = True
                self.index += 1
                continue

            if char in _BRACKETS:
                if self.mass_number is not None:
                    return self._fail("mass number must precede an element symbol")
                if not (self._flush() and self._bracket(_BRACKETS[char])):
                    return False
                continue

            if char == _MASS_OPEN:
                if self.mass_number is not None:
                    return self._fail("mass number given twice")
                if not (self._flush() and self._mass_annotation()):
                    return False
                continue

            scan = scan_number(text, self.index, self.config)
            if scan is not None:
                if not self._number(scan):
                    return False
                continue

            if self._symbol():
                continue
            if self.error is not None:
                return False

            if char.isalpha():
                return self._fail(f"unknown element symbol at {char!r}")
            # stray punctuation
            if not self._flush():
                return False
            self.index += 1

        if self.mass_number is not None:
            return self._fail("mass number not followed by an element symbol")
        return self._flush()

    def _number(self, scan: NumberScan) -> bool:
        if self.mass_number is not None:
            return self._fail("mass number must precede an element symbol")

        if scan.charge or scan.superscript:
            self.index = scan.end
            if scan.charge or (self.isotope is not None and self._at_end):
                return self._set_charge(scan.value)
            # unsigned superscript digits before a symbol are a mass number
            if not self._flush():
                return False
            if not 0 < scan.value <= MAX_COUNT:
                return self._fail(f"mass number {scan.value} out of range", scan.start)
            self.mass_number = scan.value
            return True

        self.index = scan.end
        if self.isotope is not None:
            isotope, self.isotope = self.isotope, None
            amount = scan.value * (1 if self.multiplier is None else self.multiplier)
            if amount > MAX_COUNT:
                return self._fail(f"count of {isotope.key} exceeds {MAX_COUNT}", scan.start)
            return self._add(isotope.key, amount)

        if scan.value > MAX_COUNT:
            return self._fail(f"multiplier {scan.value} exceeds {MAX_COUNT}", scan.start)
        self.multiplier = scan.value
        return True

    def _symbol(self) -> bool:
        found = scan_symbol(self.text, self.index, self.table)
        if found is None:
            return False
        element, end = found
        if not self._flush():
            return False

        if self.mass_number is not None:
            isotope = self.table.isotope_by_mass(element, self.mass_number)
            if isotope is None:
                return self._fail(f"no isotope {self.mass_number}{element.symbol} on record")
            self.mass_number = None
        else:
            isotope = self.table.common_isotope(element)
            if isotope is None:
                return self._fail(f"no common isotope of {element.symbol} on record")

        self.isotope = isotope
        self.read_term = True
        self.index = end
        return True

    def _mass_annotation(self) -> bool:
        scan = scan_number(self.text, self.index + 1, self.config)
        if scan is None:
            return self._fail("expected a mass number after '{'")
        if scan.end >= len(self.text) or self.text[scan.end] != _MASS_CLOSE:
            return self._fail("unterminated mass number", scan.end)
        if not 0 < scan.value <= MAX_COUNT:
            return self._fail(f"mass number {scan.value} out of range", scan.start)
        self.mass_number = scan.value
        self.index = scan.end + 1
        return True

    def _bracket(self, closer: str) -> bool:
        opener = self.text[self.index]
        close_index = _matching_closer(self.text, self.index, opener, closer)
        if close_index is None:
            return self._fail(f"unmatched {opener!r}")

        group = _GroupParser(
            self.text[self.index + 1 : close_index],
            self.table,
            self.config,
            offset=self.offset + self.index + 1,
        )
        if not group.run():
            self.error = group.error
            return False
        self.read_term = self.read_term or group.read_term
        if group.charge is not None:
            self.charge = group.charge

        self.index = close_index + 1
        group_multiplier = 1
        scan = scan_number(self.text, self.index, self.config)
        if scan is not None:
            if scan.charge or (scan.superscript and scan.end >= len(self.text)):
                self.index = scan.end
                if not self._set_charge(scan.value):
                    return False
            elif not scan.superscript:
                # superscript digits are left for the next term
                group_multiplier = scan.value
                self.index = scan.end

        scale = group_multiplier * (1 if self.multiplier is None else self.multiplier)
        for key, count in group.counts.items():
            if not self._add(key, count * scale):
                return False
        return True


def _matching_closer(text: str, start: int, opener: str, closer: str) -> Optional[int]:
    """Index of the bracket closing the one at ``start``, honoring nesting."""
    depth = 0
    for index in range(start, len(text)):
        if text[index] == opener:
            depth += 1
        elif text[index] == closer:
            depth -= 1
            if depth == 0:
                return index
    return None


def _parse(
    text: Optional[str],
    table: Optional[PeriodicTable],
    config: Optional[FormatConfig],
) -> Tuple[Optional[Formula], Optional[int]]:
    """Parse text, returning (formula, None) or (None, failure position)."""
    if text is None or not text.strip():
        logger.debug("Rejected blank formula text")
        return None, None
    if text.lower() == EMPTY_TOKEN:
        return Formula.EMPTY, None

    parser = _GroupParser(text, table or default_table(), config or DEFAULT_CONFIG)
    try:
        parsed = parser.run()
    except RecursionError:
        # each bracket level costs interpreter stack
        logger.debug(f"Rejected formula {text!r}: brackets nested too deeply")
        return None, None
    if not parsed:
        position, reason = parser.error or (None, "unknown error")
        logger.debug(f"Rejected formula {text!r} at position {position}: {reason}")
        return None, position
    if not parser.read_term:
        logger.debug(f"Rejected formula {text!r}: no element symbol or charge")
        return None, None
    return Formula(parser.counts, parser.charge or 0), None


def try_parse(
    text: Optional[str],
    table: Optional[PeriodicTable] = None,
    config: Optional[FormatConfig] = None,
) -> Optional[Formula]:
    """
    Parse a chemical formula, returning None if it cannot be parsed.

    Args:
        text: Formula text, e.g. ``"H2O"``, ``"CuSO4.5H2O"``, ``"{2}H2O"``,
            ``"SO₄²⁻"``; element symbols are case-sensitive
        table: Periodic table used to resolve symbols (default: RDKit-backed)
        config: Sign glyph configuration

    Returns:
        Formula, or None

    Example:
        >>> try_parse("Na,Cl") == try_parse("NaCl")
        True
        >>> try_parse("Xq") is None
        True
    """
    formula, _ = _parse(text, table, config)
    return formula


def parse(
    text: Optional[str],
    table: Optional[PeriodicTable] = None,
    config: Optional[FormatConfig] = None,
) -> Formula:
    """
    Parse a chemical formula.

    Element symbols are case-sensitive and may repeat; their amounts are
    summed. No chemical validity check is made. Isotopes other than the
    most common are written with the mass number in braces (``{2}H``) or in
    superscript (``²H``). Brackets multiply their contents by the number
    that follows them, so ``(HO)2`` equals ``H2O2``. A sign with an optional
    number (``Na+``, ``SO4-2``, ``SO₄²⁻``) sets the charge. Other punctuation
    is ignored: ``Na,Cl`` equals ``NaCl``. Text that names no element and no
    charge, such as ``"2"``, is rejected; use ``<empty>`` for the empty formula.

    Raises:
        FormulaParseError: The text is not a valid formula

    Example:
        >>> parse("H2O").nuclides["H:1"]
        2
        >>> parse("SO4-2").charge
        -2
    """
    formula, position = _parse(text, table, config)
    if formula is None:
        raise FormulaParseError(text, position)
    return formula
