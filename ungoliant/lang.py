"""Supported languages and per-language file handles."""

from __future__ import annotations

import enum
import logging
from pathlib import Path
from typing import BinaryIO

from .errors import UnknownLangError

logger = logging.getLogger(__name__)


class Lang(enum.Enum):
    """A language label, as produced by the language identifier."""

    AF = "af"
    ALS = "als"
    AM = "am"
    AN = "an"
    AR = "ar"
    ARZ = "arz"
    AS = "as"
    AST = "ast"
    AV = "av"
    AZ = "az"
    AZB = "azb"
    BA = "ba"
    BAR = "bar"
    BCL = "bcl"
    BE = "be"
    BG = "bg"
    BH = "bh"
    BN = "bn"
    BO = "bo"
    BPY = "bpy"
    BR = "br"
    BS = "bs"
    BXR = "bxr"
    CA = "ca"
    CBK = "cbk"
    CE = "ce"
    CEB = "ceb"
    CKB = "ckb"
    CO = "co"
    CS = "cs"
    CV = "cv"
    CY = "cy"
    DA = "da"
    DE = "de"
    DIQ = "diq"
    DSB = "dsb"
    DTY = "dty"
    DV = "dv"
    EL = "el"
    EML = "eml"
    EN = "en"
    EO = "eo"
    ES = "es"
    ET = "et"
    EU = "eu"
    FA = "fa"
    FI = "fi"
    FR = "fr"
    FRR = "frr"
    FY = "fy"
    GA = "ga"
    GD = "gd"
    GL = "gl"
    GN = "gn"
    GOM = "gom"
    GU = "gu"
    GV = "gv"
    HE = "he"
    HI = "hi"
    HIF = "hif"
    HR = "hr"
    HSB = "hsb"
    HT = "ht"
    HU = "hu"
    HY = "hy"
    IA = "ia"
    ID = "id"
    IE = "ie"
    ILO = "ilo"
    IO = "io"
    IS = "is"
    IT = "it"
    JA = "ja"
    JBO = "jbo"
    JV = "jv"
    KA = "ka"
    KK = "kk"
    KM = "km"
    KN = "kn"
    KO = "ko"
    KRC = "krc"
    KU = "ku"
    KV = "kv"
    KW = "kw"
    KY = "ky"
    LA = "la"
    LB = "lb"
    LEZ = "lez"
    LI = "li"
    LMO = "lmo"
    LO = "lo"
    LRC = "lrc"
    LT = "lt"
    LV = "lv"
    MAI = "mai"
    MG = "mg"
    MHR = "mhr"
    MIN = "min"
    MK = "mk"
    ML = "ml"
    MN = "mn"
    MR = "mr"
    MRJ = "mrj"
    MS = "ms"
    MT = "mt"
    MWL = "mwl"
    MY = "my"
    MYV = "myv"
    MZN = "mzn"
    NAH = "nah"
    NAP = "nap"
    NDS = "nds"
    NE = "ne"
    NEW = "new"
    NL = "nl"
    NN = "nn"
    NO = "no"
    OC = "oc"
    OR = "or"
    OS = "os"
    PA = "pa"
    PAM = "pam"
    PFL = "pfl"
    PL = "pl"
    PMS = "pms"
    PNB = "pnb"
    PS = "ps"
    PT = "pt"
    QU = "qu"
    RM = "rm"
    RO = "ro"
    RU = "ru"
    RUE = "rue"
    SA = "sa"
    SAH = "sah"
    SC = "sc"
    SCN = "scn"
    SCO = "sco"
    SD = "sd"
    SH = "sh"
    SI = "si"
    SK = "sk"
    SL = "sl"
    SO = "so"
    SQ = "sq"
    SR = "sr"
    SU = "su"
    SV = "sv"
    SW = "sw"
    TA = "ta"
    TE = "te"
    TG = "tg"
    TH = "th"
    TK = "tk"
    TL = "tl"
    TR = "tr"
    TT = "tt"
    TYV = "tyv"
    UG = "ug"
    UK = "uk"
    UR = "ur"
    UZ = "uz"
    VEC = "vec"
    VEP = "vep"
    VI = "vi"
    VLS = "vls"
    VO = "vo"
    WA = "wa"
    WAR = "war"
    WUU = "wuu"
    XAL = "xal"
    XMF = "xmf"
    YI = "yi"
    YO = "yo"
    YUE = "yue"
    ZH = "zh"
    MULTI = "multi"

    @classmethod
    def parse(cls, s: str) -> "Lang":
        """Parse a language code, raising UnknownLangError if unsupported."""
        try:
            return cls(s)
        except ValueError:
            raise UnknownLangError(s) from None

    def to_static(self) -> str:
        """Return the label used when writing this language out."""
        return _DISPLAY_OVERRIDES.get(self, self.value)

    def __str__(self) -> str:
        return self.to_static()


# Display labels that differ from the parsed code.
_DISPLAY_OVERRIDES: dict[Lang, str] = {
    Lang.CBK: "cbr",
    Lang.YI: "vi",
}

#: Language codes available in the corpus, derived from the identifier labels.
LANG: frozenset[str] = frozenset(lang.value for lang in Lang)


class LangFiles:
    """Holds an open file for each supported language.

    Every language gets ``<src>/<lang>.txt``, opened for reading and
    appending and created if missing. Use as a context manager so that the
    many handles are released.
    """

    def __init__(self, src: str | Path) -> None:
        logger.warning("LangFiles is deprecated in favor of the rotating writers")
        src = Path(src)
        self._handles: dict[str, BinaryIO] = {}
        try:
            for lang in LANG:
                path = (src / lang).with_suffix(".txt")
                logger.debug("creating/opening %s", path)
                self._handles[lang] = open(path, "a+b")
        except OSError:
            self.close()
            raise

    def get(self, key: str) -> BinaryIO | None:
        """Return the handle for a language code, or None if there is none."""
        return self._handles.get(key)

    def close(self) -> None:
        """Close every open handle."""
        for handle in self._handles.values():
            handle.close()

    def __enter__(self) -> "LangFiles":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()