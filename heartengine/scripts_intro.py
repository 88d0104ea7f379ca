"""The opening script: the teacher's personality quiz and the route selection."""

from __future__ import annotations

from typing import List, Optional

from heartengine.dialog import NPC, Actor, Dialog, DialogSystem, Entry, Quiz


def _scored(question: str, choices) -> Quiz:
    return Quiz(
        question=question,
        options=[text for text, _ in choices],
        scores=[score for _, score in choices],
    )


def intro_script() -> List[Entry]:
    """Fresh entries of the opening conversation, ending with the route choice."""
    d1 = Dialog(lines=[
        "（你原本想選修一門正常的課，走進分部圖書館後，看向手機確認選課系統時，發現自己莫名多了一門「遊戲程式與戀愛學特訓班」。）",
        "（正準備點開查看時，突然被一隻有力的大手扯住袖子——）",
        "老師：「割布麟同學，請問你母單嗎？」",
        "割布麟：「......？」",
        "老師：「我想...這門課應該很適合你，趕快進來吧！」",
        "割布麟：「等、等等——這門課到底是什麼？！它根本不在課表裡啊！」",
        "（老師神秘地推了推眼鏡，教室大門自動在割布麟身後關上。）",
        "老師：「這是一門結合 AI、遊戲設計和……戀愛學的終極課程，你的任務很簡單——成功攻略我設計的 AI 角色，否則……直接不及格。」",
        "割布麟：「什麼？！可是我母單20年！！！這太強人所難了吧」",
        "老師（微笑）：「不會吧，連 NPC 都談不下來？」",
        "（...）",
    ])

    q1 = Quiz(
        question="老師：「戀愛遊戲的核心是角色設計！來吧，為你的 AI 角色設計一個迷人的設定！」",
        options=[
            "1.「應該有一個強烈的背景故事，讓角色有層次感！」",
            "2.「當然要有甜蜜的戀愛情節，製造心動瞬間！」",
            "3.「沉浸式互動才是王道，讓玩家自由選擇情節發展！」",
        ],
    )

    d2 = Dialog(lines=[
        "老師：「很好，現在，讓你的 AI 角色開始對話吧！」",
        "（割布麟開始體驗第一場 AI 模擬對話，但……）",
        "AI 角色：「初次見面……請輸入選項……」",
        "（系統錯誤，AI 角色突然開始胡言亂語）",
        "AI 角色：「這不是約會，而是統計數據的美妙運算！」",
        "割布麟：「老師，這個 AI 真的能攻略嗎？！」",
        "老師（推眼鏡）：「那就要看你的能力了。」",
        "（進入決定初始好感度劇情，玩家選擇回應方式將決定分數）",
    ])

    q2 = _scored("1. 心儀對象跟你說想出門看最近最流行的玫瑰園，你會穿什麼？", [
        ("A. 簡單的黑白灰格紋襯衫", 0),
        ("B. 平常手臂有加強，穿高磅素T就好", 10),
        ("C. GU 大地色穿搭，短褲白襪", 5),
    ])
    q3 = _scored("2. 朋友揪去夜店玩，你的第一個反應是？", [
        ("A.「蛤？那邊不是很貴嗎？」", 0),
        ("B.「誒剛好！可以揪認識的脆友在夜店見面」", 10),
        ("C.「好啊。我常去。（結果回去偷偷焦慮襯衫會不會太正式。）」", 5),
    ])
    q4 = _scored("3. 你正在用交友軟體，突然滑到一個超對你胃口的女生，你的開場白是？", [
        ("A.「我也喜歡這部電影！」", 5),
        ("B.「哈哈哈哈哈」", 10),
        ("C.「嗨～尼看起來豪有氣質，平常喜歡看書嗎？」", 0),
    ])
    q5 = _scored("4. 你喜歡的女生說最近壓力好大，想要來點小確幸，你的選擇是？", [
        ("A.「記得你上次發限動想看夜景？今天晚上我開車載你去陽明山呀」", 10),
        ("B.「晚上送宵夜給你呀，你想吃什麼？」", 0),
        ("C.「帶你去吃我家巷口的火鍋店！」", 5),
    ])
    q6 = _scored("5. 你長得如何？（誠實回答！）", [
        ("A.「長得普通啦，反正看順眼最重要。」", 0),
        ("B.「師大彭于晏」", 10),
        ("C.「還可以啦，有時候會被說耐看。」", 5),
    ])
    q7 = _scored("6. 女生問：「你 IG版面怎麼都沒發文？」你會怎麼回答？", [
        ("A.「懶得發，而且生活沒什麼特別的。」", 0),
        ("B.「我都典藏了啦，沒什麼人在看。」", 5),
        ("C.「哈哈我都發摯友啦，等下加妳進去。」", 10),
    ])
    q8 = _scored("7. 你的身高是？（誠實回答！）", [
        ("A.「178，剛好不超標！」", 5),
        ("B.「182，不過應該還好吧？」", 10),
        ("C.「170，這題對我很友善。」", 0),
    ])
    q9 = _scored("8. 女生突然說：「你覺得男生應該主動付錢嗎？」你的反應？", [
        ("A.「AA 最公平吧？」", 0),
        ("B.「當然要付啊，小錢啦」", 10),
        ("C.「要看關係啦，曖昧的話請一下也 OK 吧？」", 5),
    ])
    q10 = _scored("9. 她要過生日，你會送什麼？", [
        ("A.「送手作的禮物比較有心意吧？」", 0),
        ("B.「送香水組合，之後再問她喜歡哪個味道」", 10),
        ("C.「買個可愛的蛋糕小加手寫卡片。」", 5),
    ])
    q11 = _scored("10. 你有沒有女朋友？", [
        ("A.「沒有，之前追過但沒成功。」", 0),
        ("B.「有過幾個，但現在單身。」", 10),
        ("C.「剛被分手，但我還沒走出來。」", 5),
    ])

    transition = Dialog(lines=[
        "老師：「很好！現在讓我們看看你的哥布林指數...」",
        "（系統正在計算你的分數...）",
        "老師：「根據你的回答，我為你安排了最適合的AI角色進行攻略練習。」",
        "老師：「請選擇你想要學習的課程方向：」",
    ])

    # The route choice only picks a route and never changes the score.
    selection = Quiz(
        question="選擇你的學習路線：",
        options=[
            "A. 程式邏輯導向 - 周理安（行為樹AI設計）",
            "B. 創意劇本導向 - 林夢瑤（戀愛劇情設計）",
            "C. 心理分析導向 - 沈奕恆（情感互動設計）",
        ],
        scores=[0, 0, 0],
    )

    return [d1, q1, d2, q2, q3, q4, q5, q6, q7, q8, q9, q10, q11, transition, selection]


def init_begin(system: DialogSystem, actor: Optional[Actor]) -> NPC:
    """Attach the opening script to the teacher and make it approachable."""
    npc = system.add_npc(actor, intro_script())
    npc.route_enabled = True
    if npc.actor is not None:
        npc.actor.inv_mass = 0
    npc.in_dialog = False
    return npc