"""
英文別名配置模組

集中管理英文目標句的別名資料，對象為以韓語為母語的學習者：
縮寫與展開、數字/時間的韓式發音拼寫、單一字母的韓式發音。
"""


class EnglishAliasConfig:
    """英文別名配置類別 - 集中管理縮寫與發音別名"""

    # 縮寫 -> 展開
    # 格式: 縮寫 -> [展開單字...]
    # 雙向查詢：目標為縮寫時比對展開，說出縮寫時反查目標
    CONTRACTIONS = {
        "i'm": ["i", "am"],
        "you're": ["you", "are"],
        "he's": ["he", "is"],
        "she's": ["she", "is"],
        "it's": ["it", "is"],
        "we're": ["we", "are"],
        "they're": ["they", "are"],
        "i'll": ["i", "will"],
        "you'll": ["you", "will"],
        "he'll": ["he", "will"],
        "she'll": ["she", "will"],
        "it'll": ["it", "will"],
        "we'll": ["we", "will"],
        "they'll": ["they", "will"],
        "won't": ["will", "not"],
        "can't": ["can", "not"],
        "don't": ["do", "not"],
        "doesn't": ["does", "not"],
        "didn't": ["did", "not"],
        "isn't": ["is", "not"],
        "aren't": ["are", "not"],
        "wasn't": ["was", "not"],
        "weren't": ["were", "not"],
        "haven't": ["have", "not"],
        "hasn't": ["has", "not"],
        "hadn't": ["had", "not"],
        "shouldn't": ["should", "not"],
        "wouldn't": ["would", "not"],
        "couldn't": ["could", "not"],
    }

    # 數字/時間 -> 可能的韓式發音與英文拼寫
    # 比對前會移除發音中的空白 ("nine am" -> "nineam")
    NUMBER_TIME_PHONETICS = {
        "9am": ["나인에이엠", "9에이엠", "나인am", "nine am", "나인 에이엠", "9 am"],
        "5:30am": [
            "파이브써티에이엠",
            "5:30에이엠",
            "파이브써티am",
            "five thirty am",
            "파이브 써티 에이엠",
            "5 30 am",
            "5:30 am",
        ],
        "9": ["나인", "nine"],
        "5": ["파이브", "five"],
        "30": ["써티", "thirty"],
    }

    # 單一字母 -> 韓式發音
    LETTER_PHONETICS = {
        "a": ["어", "에이", "아"],
    }

    # 發音比對門檻
    NUMBER_PHONETIC_THRESHOLD = 0.7
    LETTER_PHONETIC_THRESHOLD = 0.8

    # 相似度預設門檻 (1-2 字母 / 3 字母以上)
    DEFAULT_SHORT_WORD_THRESHOLD = 0.4
    DEFAULT_LONG_WORD_THRESHOLD = 0.6
