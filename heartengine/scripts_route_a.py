"""Route A: 周理安 teaches behaviour-tree AI design."""

from __future__ import annotations

from typing import List, Optional, Sequence

from heartengine.dialog import NPC, Actor, Dialog, DialogSystem, DialogType, Entry, Quiz


def _quiz(question: str, options: Sequence[str], scores: Sequence[int], answer: int,
          feedback: Sequence[str]) -> Quiz:
    return Quiz(
        question=question,
        options=list(options),
        scores=list(scores),
        feedback=list(feedback),
        ans_index=answer,
    )


def route_a_script() -> List[Entry]:
    """Fresh entries of the behaviour-tree route, ending with its good and bad endings."""
    d11 = Dialog(lines=[
        "（場景：圖書館 801 教室，課堂開始，螢幕正播放「什麼是行為樹 AI」的簡報動畫）",
        "周理安：「遊戲的核心是演算法與機制，而不是表面的情感渲染。」",
        "老師：「很好，現在我們來設計 NPC 的行為樹，讓角色能根據玩家的選擇產生不同的對話與反應。」",
        "主角（murmur）：「這門課的內容……怎麼越來越像演算法的學習課程了？」",
        "老師：「要攻略 AI，首先你得思考：如果 NPC 有思考能力，它會根據什麼改變行為？」",
        "主角：「這比攻略活人還難吧……」",
        "周理安（推了推眼鏡）：「思考要條理、邏輯要清晰——不然連 ‘if’ 條件都判斷不了。」",
    ])

    d12 = Dialog(lines=[
        "周理安：「我們來談談什麼是行為樹。」",
        "（教室裡，老師拿出一塊寫滿愛心與箭頭的白板。）",
        "老師：「戀愛不是亂槍打鳥，是有策略的行為流程。行為樹就是一種用來安排行為順序的結構——像是戀愛流程圖！」",
        "周理安：「根節點就是起點，從這裡開始分析你的戀愛流程。」",
        "周理安：「簡單來說，行為樹從『根節點』開始，下方是『控制節點』與『行為節點』。執行會從上往下，一步步判斷。」",
    ])

    q11 = _quiz(
        "周理安：「測驗開始。你第一次傳訊息給喜歡的人時，哪個最像『行為樹的根節點』？」",
        ["A. 說晚安", "B. 確認對方有沒有上線", "C. 決定要不要傳訊息", "D. 看對方的限時動態"],
        [5, 5, 0, 5],
        2,
        [
            "周理安：「這是行為，但不是起始決策。」",
            "周理安：「這是條件檢查，但還不是根源。」",
            "周理安：「正確。一切行動始於決策。\n主角（心想）：「原來戀愛也有 if-else 條件判斷啊……」」",
            "周理安：「觀察是過程，但根節點是更早的決策。」",
        ],
    )

    q12 = _quiz(
        "周理安：「下一個問題。哪個說法最接近行為樹的『從上往下、從左到右執行』的特性？」",
        [
            "A. 先看對方限動再決定行動",
            "B. 同時去對方家門口、教室門口、IG留言",
            "C. 先告白再看對方長怎樣",
            "D. 隨便點一個選項看運氣",
        ],
        [0, 10, 10, 5],
        0,
        [
            "周理安：「是的，這體現了順序性。\n周理安：「邏輯比衝動重要。這是基本。」」",
            "周理安：「行為樹通常是循序執行，而非並行。」",
            "周理安：「順序錯了，這不符合邏輯流程。」",
            "周理安：「行為樹講求的是明確的邏輯，不是隨機。」",
        ],
    )

    d21 = Dialog(lines=[
        "周理安：「接下來，我們討論 Selector 和 Sequence 節點。」",
        "（走廊上，理安遞給你一張便條紙。）",
        "周理安：「這是戀愛流程的兩種邏輯模型。看懂再說話。」",
        "周理安：「Selector，選擇節點，像是『今天邀約的方式』。如果約喝咖啡失敗，就嘗試約吃拉麵，再失敗就試約看書。只要一個成功，整個選擇就成功並停止，像是在嘗試不同方法。」",
        "周理安：「Sequence，序列節點，像是『告白前的準備流程』。要確保：對方心情好、自己沒口臭、場地氣氛OK，所有條件都成功，才能執行最終的『告白』動作。任何一步失敗，整個序列就失敗。」",
    ])

    q21 = _quiz(
        "周理安：「測驗。你要跟我告白，哪個是 Sequence 的例子？」",
        [
            "A. 直接告白失敗了就跑走",
            "B. 確認我在、準備花、深呼吸、才走過去",
            "C. 同時拿三束花丟給三個人看誰接",
            "D. 靠直覺衝過去喊「我喜歡你」",
        ],
        [0, 10, 5, 0],
        1,
        [
            "周理安：「這更像單一行為及其後果，不是序列。」",
            "周理安：「正確。這描述了一系列必須依次成功的步驟。\n主角（心想）：「感覺像在寫 SOP……戀愛還真嚴謹。」」",
            "周理安：「這聽起來很混亂，不符合序列的有序性。」",
            "周理安：「衝動行事，缺乏序列要求的步驟檢查。」",
        ],
    )

    q22 = _quiz(
        "周理安：「Selector 比喻成戀愛狀況，最接近哪個？」",
        [
            "A. 告白一定要成功，不然整個流程停止",
            "B. 今天一定要約成，不管用什麼方法",
            "C. 失敗一次就放棄",
            "D. 每個條件都要達成才能告白",
        ],
        [5, 10, 0, 5],
        1,
        [
            "周理安：「這是 Sequence 中途失敗的結果，不是 Selector 的特性。」",
            "周理安：「對。Selector 會嘗試所有子節點直到一個成功為止。\n周理安：「會變通的人，戀愛才有機會。」」",
            "周理安：「Selector 會嘗試所有選項，直到成功或所有都失敗。這太快放棄了。」",
            "周理安：「這是 Sequence 的特性，要求所有條件都滿足。」",
        ],
    )

    d31 = Dialog(lines=[
        "周理安：「再來講講 Action，行為節點。」",
        "（你終於鼓起勇氣問理安：『那角色實際上怎麼做事情？』她翻開一本筆記。）",
        "理安：「葉子節點就是具體動作，比如走向某人、打招呼、送花。這些動作才會真的發生在遊戲中。」",
        "理安：「記住，控制節點只是『流程管控』，Action 才是『真的執行』。」",
    ])

    q31 = _quiz(
        "周理安：「下列哪一個最像是 Action 節點？」",
        ["A. 思考是否要送花", "B. 規劃今天的行程", "C. 真正遞出那一束花", "D. 猶豫要不要傳訊息"],
        [5, 5, 10, 0],
        2,
        [
            "周理安：「思考是內部過程，Action 是外部行為。」",
            "周理安：「規劃更像是控制節點的工作，決定行為順序。」",
            "周理安：「是的，這是具體的、可執行的動作。\n主角（心想）：「光想不行，還是得遞出花的那一刻才是真正的行動！」」",
            "周理安：「猶豫是狀態，不是執行的動作。」",
        ],
    )

    q32 = _quiz(
        "周理安：「你設計一個 NPC，當他看到喜歡的人時會『笑』這個行為，這是什麼？」",
        ["A. 控制節點", "B. Sequence", "C. Action 節點", "D. 根節點"],
        [5, 5, 10, 5],
        2,
        [
            "周理安：「控制節點決定流程，不直接執行『笑』。」",
            "周理安：「Sequence 是一連串動作，『笑』是單個動作。」",
            "周理安：「正確。『笑』是一個具體的行為。\n周理安：「角色不笑，你就沒有機會了。」」",
            "周理安：「根節點是整個行為樹的起點。」",
        ],
    )

    d41 = Dialog(lines=[
        "周理安：「現在來談談成功與失敗，Success/Failure。」",
        "（你問理安：「如果我遞花她沒接呢？」）",
        "周理安（淡淡說）：「那就是失敗。行為樹每一步都會回報『成功』或『失敗』，這會影響整體流程能不能繼續下去。」",
        "周理安：「簡單說，行為節點會回傳『Success』或『Failure』。控制節點根據這些回傳值決定是否繼續下一步。」",
    ])

    q41 = _quiz(
        "周理安：「測驗。你試圖讓 NPC 說「我喜歡你」，但對方角色不在現場。這個行為的回傳是？ 」",
        ["A. Success", "B. Failure", "C. Running", "D. Happy"],
        [5, 10, 5, 0],
        1,
        [
            "周理安：「目標未達成，不能算 Success。」",
            "周理安：「是的，前提條件不滿足，行為失敗。\n主角（心想）：「所以……這段戀愛判定失敗 Q_Q」」",
            "周理安：「Running 表示執行中，但這裡行為無法開始。」",
            "周理安：「Happy 不是行為樹的標準回傳狀態。」",
        ],
    )

    q42 = _quiz(
        "周理安：「在 Sequence 中，第二步驟失敗了，後面的行為還會執行嗎？」",
        ["A. 一定會", "B. 不會", "C. 會視心情決定", "D. 看遊戲設定"],
        [5, 10, 0, 5],
        1,
        [
            "周理安：「Sequence 要求所有步驟成功。一步失敗則整體失敗。」",
            "周理安：「正確。Sequence 的特性就是這樣。\n周理安：「戀愛流程中出現漏洞，當然得中止重來。」」",
            "周理安：「行為樹是依賴邏輯，不是心情。」",
            "周理安：「這是行為樹標準定義的一部分，不是隨意設定的。」",
        ],
    )

    d51 = Dialog(lines=[
        "周理安：「最後是 Running，執行中狀態。」",
        "（某天下課後，你試著模擬一段 NPC 和玩家互動的劇情給理安看。）",
        "周理安（點頭）：「你少了一個關鍵狀態：Running。」",
        "周理安：「有些行為不是立即成功或失敗，而是正在進行中，例如等待回覆或角色移動。這種狀態就叫做 Running。」",
    ])

    q51 = _quiz(
        "周理安：「你傳訊息後，對方已讀但還沒回，這是哪種狀態？」",
        ["A. Success", "B. Failure", "C. Running", "D. Timeout"],
        [5, 0, 10, 5],
        2,
        [
            "周理安：「還沒收到回覆，不能算成功。」",
            "周理安：「雖然可能讓人焦慮，但技術上還未失敗。」",
            "周理安：「對。等待回應就是一種典型的 Running 狀態。\n主角（心想）：「這才是真正最折磨人的狀態……戀愛中的 loading 畫面。」」",
            "周理安：「Timeout 可能是 Failure 的一種原因，但 Running 是當前狀態。」",
        ],
    )

    q52 = _quiz(
        "周理安：「NPC 開始走向喜歡的人，中途還沒走到，屬於什麼狀態？」",
        ["A. Failure", "B. Waiting", "C. Running", "D. Ending"],
        [0, 5, 10, 5],
        2,
        [
            "周理安：「除非中途有障礙無法到達，否則還不是 Failure。」",
            "周理安：「Waiting 太籠統，Running 更精確描述進行中的動作。」",
            "周理安：「是的，移動過程是持續性的，屬於 Running。\n周理安：「在愛情裡，進行中的動作，也是一種希望。」」",
            "周理安：「還沒到結局呢。」",
        ],
    )

    good_end = Dialog(type=DialogType.GOODEND, lines=[
        "（夕陽下，你與理安一起站在天台邊緣，風輕輕吹起她的頭髮。）",
        "周理安（低聲）：「你居然……真的學會了全部的行為樹邏輯？就連 Running 的邏輯都能用來比喻等喜歡的人回訊息……」",
        "你：「我為了能和妳說上話，特訓了好幾天。」",
        "（她輕輕瞪了你一眼，然後眼神轉為柔和。）",
        "周理安：「那我現在的狀態是什麼？」",
        "你（盯著她的眼睛）：「應該是……Running，因為我還不知道你對我的回應。」",
        "周理安（停頓）：「錯了，是 Success，你這笨蛋。」",
        "「你成功通關了《遊戲程式與戀愛學特訓班》：周理安路線｜攻略達成」",
    ])

    bad_end = Dialog(type=DialogType.BADEND, lines=[
        "（空蕩蕩的教室，結課的最後一晚。）",
        "（你坐在位子上，看著空空如也的白板。桌上放著你的測驗結果——答錯了太多題。）",
        "老師（拍你肩膀）：「不錯了，至少你撐到最後。不過這堂課不是誰都能順利通關的。」",
        "（你低頭一笑，望向窗外。）",
        "主角（murmur）：「原來……就算懂了一堆理論，戀愛還是不能全靠演算法。」",
        "（這時，門口傳來熟悉的腳步聲。）",
        "周理安：「……你不及格了耶。」",
        "你：「對啊，我猜我沒辦法用行為樹攻略你了。」",
        "（她站在門邊，忽然露出一點笑意。）",
        "周理安：「那就……改用別的演算法再試一次啊。」",
        "（畫面轉黑，顯示文字）",
        "「你未能通關《遊戲程式與戀愛學特訓班》：周理安路線｜未攻略成功，但故事還沒結束……？」",
    ])

    return [
        d11, d12, q11, q12, d21, q21, q22, d31, q31, q32,
        d41, q41, q42, d51, q51, q52, good_end, bad_end,
    ]


def init_a(system: DialogSystem, actor: Optional[Actor]) -> NPC:
    """Attach the behaviour-tree route to an actor and make it approachable."""
    npc = system.add_npc(actor, route_a_script())
    if npc.actor is not None:
        npc.actor.inv_mass = 0
    npc.in_dialog = False
    npc.route_enabled = True
    return npc