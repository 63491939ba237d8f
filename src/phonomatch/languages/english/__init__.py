"""
英文別名資料

主要類別:
- EnglishAliasConfig: 縮寫、數字/時間發音、字母發音別名
"""

from .config import EnglishAliasConfig

__all__ = ["EnglishAliasConfig"]
