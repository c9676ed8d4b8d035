"""
Exponent Names — английские названия степеней 10 для engineering notation

Таблица short scale названий для exponent, кратных 3, от 0 (без названия)
до 333 (decicentillion). Неизменяемый mapping, строится один раз при импорте.
"""

from types import MappingProxyType
from typing import Final, Mapping

_NAMES: Final[tuple[str, ...]] = (
    "",
    "thousand",
    "million",
    "billion",
    "trillion",
    "quadrillion",
    "quintillion",
    "sextillion",
    "septillion",
    "octillion",
    "nonillion",
    "decillion",
    "undecillion",
    "duodecillion",
    "tredecillion",
    "quattuordecillion",
    "quindecillion",
    "sedecillion",
    "septendecillion",
    "octodecillion",
    "novendecillion",
    "vigintillion",
    "unvigintillion",
    "duovigintillion",
    "tresvigintillion",
    "quattuorvigintillion",
    "quinvigintillion",
    "sesvigintillion",
    "septemvigintillion",
    "octovigintillion",
    "novemvigintillion",
    "trigintillion",
    "untrigintillion",
    "duotrigintillion",
    "trestrigintillion",
    "quattuortrigintillion",
    "quintrigintillion",
    "sestrigintillion",
    "septentrigintillion",
    "octotrigintillion",
    "noventrigintillion",
    "quadragintillion",
    "unquadragintillion",
    "duoquadragintillion",
    "tresquadragintillion",
    "quattuorquadragintillion",
    "quinquadragintillion",
    "sesquadragintillion",
    "septenquadragintillion",
    "octoquadragintillion",
    "novenquadragintillion",
    "quinquagintillion",
    "unquinquagintillion",
    "duoquinquagintillion",
    "tresquinquagintillion",
    "quattuorquinquagintillion",
    "quinquinquagintillion",
    "sesquinquagintillion",
    "septenquinquagintillion",
    "octoquinquagintillion",
    "novenquinquagintillion",
    "sexagintillion",
    "unsexagintillion",
    "duosexagintillion",
    "tresexagintillion",
    "quattuorsexagintillion",
    "quinsexagintillion",
    "sesexagintillion",
    "septensexagintillion",
    "octosexagintillion",
    "novensexagintillion",
    "septuagintillion",
    "unseptuagintillion",
    "duoseptuagintillion",
    "treseptuagintillion",
    "quattuorseptuagintillion",
    "quinseptuagintillion",
    "seseptuagintillion",
    "septenseptuagintillion",
    "octoseptuagintillion",
    "novenseptuagintillion",
    "octogintillion",
    "unoctogintillion",
    "duooctogintillion",
    "tresoctogintillion",
    "quattuoroctogintillion",
    "quinoctogintillion",
    "sexoctogintillion",
    "septemoctogintillion",
    "octooctogintillion",
    "novemoctogintillion",
    "nonagintillion",
    "unnonagintillion",
    "duononagintillion",
    "trenonagintillion",
    "quattuornonagintillion",
    "quinnonagintillion",
    "senonagintillion",
    "septenonagintillion",
    "octononagintillion",
    "novenonagintillion",
    "centillion",
    "uncentillion",
    "duocentillion",
    "trescentillion",
    "quattuorcentillion",
    "quincentillion",
    "sexcentillion",
    "septencentillion",
    "octocentillion",
    "novencentillion",
    "decicentillion",
)

# Максимальный exponent, для которого есть название
MAX_NAMED_EXPONENT: Final[int] = 3 * (len(_NAMES) - 1)

# exponent → название: {0: "", 3: "thousand", 6: "million", ..., 333: "decicentillion"}
POW_TEN_TO_NAME: Final[Mapping[int, str]] = MappingProxyType(
    {3 * index: name for index, name in enumerate(_NAMES)}
)


def exp_name(exponent: int) -> str:
    """
    Название степени 10 для exponent.

    Exponent вне таблицы (отрицательный, больше MAX_NAMED_EXPONENT или не
    кратный 3) даёт пустую строку. Это граница таблицы, а не ошибка.

    Examples:
        >>> exp_name(9)
        'billion'
        >>> exp_name(0)
        ''
        >>> exp_name(336)
        ''
    """
    return POW_TEN_TO_NAME.get(exponent, "")
