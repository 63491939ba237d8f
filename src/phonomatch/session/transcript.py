"""
語音轉錄累積器

語音辨識會不定時送來「中間結果」與「最終結果」。只有最終結果會併入
比對用的轉錄；中間結果僅供畫面顯示，避免尚未確定的字閃現為命中。
"""

from typing import Iterable, Tuple

from phonomatch.utils.logger import get_logger

RecognitionResult = Tuple[str, bool]


class TranscriptBuffer:
    """
    轉錄累積器

    使用範例:
        >>> buffer = TranscriptBuffer()
        >>> buffer.add_results([("i am", True), (" hap", False)])
        'i am'
        >>> buffer.display_text
        'i am hap'
    """

    def __init__(self):
        self._text = ""
        self._interim = ""
        self._logger = get_logger("session.transcript")

    @property
    def text(self) -> str:
        """比對用轉錄 (僅含最終結果)"""
        return self._text

    @property
    def interim(self) -> str:
        return self._interim

    @property
    def display_text(self) -> str:
        """最終結果加上目前的中間結果，只用於顯示"""
        if not self._interim:
            return self._text
        return f"{self._text} {self._interim.strip()}".strip()

    def add_results(self, results: Iterable[RecognitionResult]) -> str:
        """
        處理一次辨識回報

        Args:
            results: (文字, 是否為最終結果) 序列，依辨識器回報順序

        Returns:
            str: 更新後的比對用轉錄
        """
        final_text = ""
        interim_text = ""
        for text, is_final in results:
            if is_final:
                final_text += text
            else:
                interim_text += text

        self._interim = interim_text
        if final_text:
            self._text = f"{self._text} {final_text.strip()}".strip()
            self._logger.debug(f"[Final] '{final_text.strip()}' -> '{self._text}'")
        return self._text

    def add_final(self, text: str) -> str:
        return self.add_results([(text, True)])

    def add_interim(self, text: str) -> str:
        return self.add_results([(text, False)])

    def reset(self) -> None:
        """新的一回合開始時清空"""
        self._text = ""
        self._interim = ""

    def __str__(self) -> str:
        return self._text
