"""
口說練習範例 - 模擬語音辨識逐段送來結果

這個範例展示外部協作者的典型流程：
辨識器送來中間/最終結果 -> TranscriptBuffer 累積 -> RoundState 重新評估 -> 顯示狀態。

執行前請先安裝套件:
    pip install -e .
"""

from phonomatch import DrillEngine, WordState

# 全域 Engine (單例模式)
engine = DrillEngine()

SYMBOLS = {
    WordState.REVEALED: "{}",
    WordState.MATCHED: "[{}]",
    WordState.AUTO_REVEALED: "({})",
    WordState.PREVIEWED: "<{}>",
    WordState.BLANK: "___",
}


def render(round_state, records):
    states = round_state.word_states(records)
    return " ".join(SYMBOLS[state].format(word) for state, word in zip(states, round_state.tokens))


def demo_round(sentence, recognizer_events, preview=None):
    print("=" * 60)
    print(f"目標句: {sentence}")
    print("=" * 60)

    round_state = engine.create_round(sentence)
    buffer = engine.create_transcript_buffer()

    if preview is not None:
        print(f"  預覽: {round_state.reveal(preview)}")

    for results in recognizer_events:
        buffer.add_results(results)
        outcome = round_state.evaluate(buffer.text)
        print(f"  轉錄: {buffer.display_text!r:<32} {render(round_state, outcome.records)}")
        if outcome.advance_after is not None:
            verdict = "得分" if outcome.scored else "不計分"
            print(f"  完成 ({verdict})，{outcome.advance_after} 秒後進入下一題")
            break
    print()


if __name__ == "__main__":
    demo_round(
        "I'm going to wake up at 9am.",
        [
            [("i am", False)],
            [("i am going", True)],
            [(" to weak", False)],
            [(" to wake up at nine", True)],
        ],
    )
    demo_round(
        "Don't worry, be happy!",
        [
            [("do not", True)],
            [(" worry be hapi", True)],
        ],
        preview=3,
    )
