"""
別名表模組 (Alias Tables)

三張唯讀查詢表，作為配置注入比對器：
- contractions: 縮寫 <-> 展開 (雙向)
- number_phonetics: 數字/時間 -> 發音拼寫 (單向)
- letter_phonetics: 單一字母 -> 發音拼寫 (單向)

縮寫表以「保留撇號」的小寫形式為 key ("we're" 與 "were" 是不同的字)；
發音表以 normalize() 後的形式為 key。

使用方式:
    tables = AliasTables.default()
    tables.contraction_expansion("don't")   # ('do', 'not')

    # 自訂語系
    tables = AliasTables.from_dict({"contractions": {"gonna": ["going", "to"]}})
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from .normalizer import PUNCTUATION, normalize

AliasMapping = Mapping[str, Tuple[str, ...]]

_EMPTY: AliasMapping = MappingProxyType({})

# 縮寫 key 去除撇號以外的標點；彎引號統一為直撇號
_CONTRACTION_STRIP = str.maketrans("\u2019", "'", PUNCTUATION.replace("'", ""))


def contraction_key(word: str) -> str:
    """
    縮寫查詢用 key：小寫、保留字內撇號

    範例:
        >>> contraction_key("Don\u2019t!")
        "don't"
    """
    return word.translate(_CONTRACTION_STRIP).strip("'").lower()


def _freeze_table(name: str, raw: Optional[Mapping[str, Iterable[str]]], *, normalize_keys: bool) -> AliasMapping:
    if raw is None:
        return _EMPTY
    if not isinstance(raw, Mapping):
        raise TypeError(f"{name} must be a mapping, got {type(raw).__name__}")

    frozen: Dict[str, Tuple[str, ...]] = {}
    for key, values in raw.items():
        if not isinstance(key, str) or not key:
            raise ValueError(f"{name}: key must be a non-empty string, got {key!r}")
        if isinstance(values, str) or not isinstance(values, Iterable):
            raise TypeError(f"{name}[{key!r}]: value must be a sequence of strings")
        entries = tuple(values)
        if not all(isinstance(v, str) for v in entries):
            raise TypeError(f"{name}[{key!r}]: every entry must be a string")

        table_key = normalize(key) if normalize_keys else contraction_key(key)
        frozen[table_key] = tuple(v.lower() for v in entries)
    return MappingProxyType(frozen)


@dataclass(frozen=True)
class AliasTables:
    """
    別名表 (不可變)

    Attributes:
        contractions: 縮寫原形 (小寫、含撇號) -> 展開單字
        number_phonetics: 正規化數字/時間 -> 發音拼寫
        letter_phonetics: 正規化字母 -> 發音拼寫
        number_threshold: 數字/時間發音的相似度門檻
        letter_threshold: 字母發音的相似度門檻
    """

    contractions: AliasMapping = field(default_factory=lambda: _EMPTY)
    number_phonetics: AliasMapping = field(default_factory=lambda: _EMPTY)
    letter_phonetics: AliasMapping = field(default_factory=lambda: _EMPTY)
    number_threshold: float = 0.7
    letter_threshold: float = 0.8
    _contraction_index: AliasMapping = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        index = {contraction_key(k): v for k, v in self.contractions.items()}
        object.__setattr__(self, "_contraction_index", MappingProxyType(index))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AliasTables":
        """
        由一般 dict 建立別名表

        Args:
            data: 可含 "contractions"、"number_phonetics"、"letter_phonetics"、
                "number_threshold"、"letter_threshold"

        Raises:
            TypeError: 表格或值的型別錯誤
            ValueError: key 為空或不是字串
        """
        return cls(
            contractions=_freeze_table("contractions", data.get("contractions"), normalize_keys=False),
            number_phonetics=_freeze_table("number_phonetics", data.get("number_phonetics"), normalize_keys=True),
            letter_phonetics=_freeze_table("letter_phonetics", data.get("letter_phonetics"), normalize_keys=True),
            number_threshold=float(data.get("number_threshold", 0.7)),
            letter_threshold=float(data.get("letter_threshold", 0.8)),
        )

    @classmethod
    def default(cls) -> "AliasTables":
        """以英文預設資料 (EnglishAliasConfig) 建立別名表"""
        from phonomatch.languages.english.config import EnglishAliasConfig

        return cls.from_dict(
            {
                "contractions": EnglishAliasConfig.CONTRACTIONS,
                "number_phonetics": EnglishAliasConfig.NUMBER_TIME_PHONETICS,
                "letter_phonetics": EnglishAliasConfig.LETTER_PHONETICS,
                "number_threshold": EnglishAliasConfig.NUMBER_PHONETIC_THRESHOLD,
                "letter_threshold": EnglishAliasConfig.LETTER_PHONETIC_THRESHOLD,
            }
        )

    def contraction_expansion(self, word: str) -> Optional[Tuple[str, ...]]:
        """查詢縮寫的展開；word 需保留撇號 ("dont" 不是縮寫)"""
        return self._contraction_index.get(contraction_key(word))

    def number_pronunciations(self, word: str) -> Optional[Tuple[str, ...]]:
        return self.number_phonetics.get(normalize(word))

    def letter_pronunciations(self, word: str) -> Optional[Tuple[str, ...]]:
        return self.letter_phonetics.get(normalize(word))

    # ------------------------------------------------------------------
    # 文本層級轉換
    # ------------------------------------------------------------------

    def expand_contractions(self, text: str) -> str:
        """
        將文本中的縮寫替換為展開形式 (輸出為小寫)

        範例:
            >>> AliasTables.default().expand_contractions("I'm sure you don't")
            'i am sure you do not'
        """
        expanded = text.lower()
        for contraction, expansion in self.contractions.items():
            pattern = re.compile(rf"\b{re.escape(contraction)}\b", re.IGNORECASE)
            expanded = pattern.sub(" ".join(expansion), expanded)
        return expanded

    def contract_words(self, text: str) -> str:
        """將文本中的展開形式替換回縮寫 (展開單字之間可為任意空白)"""
        contracted = text.lower()
        for contraction, expansion in self.contractions.items():
            expansion_pattern = r"\s+".join(re.escape(w) for w in expansion)
            pattern = re.compile(rf"\b{expansion_pattern}\b", re.IGNORECASE)
            contracted = pattern.sub(contraction, contracted)
        return contracted
