"""Route C: 沈奕恆 teaches psychology-driven interaction design."""

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


def route_c_script() -> List[Entry]:
    """Fresh entries of the psychology route, ending with its good and bad endings."""
    d11 = Dialog(lines=[
        "主角（murmur）：「蛤……這傢伙的邏輯也太哲學系了吧？」",
        "老師：「很好！這位是沈奕恆，他將帶領你進入心理學導向的戀愛互動設計之路。」",
        "沈奕恆：「開始第一個教學模組：角色視角的心理轉換是什麼？」",
        "（教室燈光昏黃，沈奕恆正坐在最後一排，手裡翻著一本心理敘事學的書。你走進來，他抬頭看你一眼。）",
        "老師（推開門，手裡抱著幾本厚重教材）：「今天我們不講遊戲機制，我們講『視角』——不只是從哪個角度看故事，而是誰在感受這段故事。」",
        "（老師在白板上畫了兩個句子：）",
        "（句子一：『他看到她哭了，有點不知所措。』）",
        "（句子二：『我看到她哭了，心臟像是被擰了一下。』）",
        "老師（轉頭問你）：「你比較想玩哪一個角色？」",
        "沈奕恆（淡淡開口）：「第一句像在看別人談戀愛，第二句……像是我在戀愛。」",
        "老師：「這就是第一人稱的魔力。」",
        "（你愣了一下，試著低聲複誦：「我……心臟被擰了一下……」）",
        "沈奕恆（輕笑）：「不習慣了吧？不習慣進入角色心裡。但你得習慣，否則你做不出讓人心動的劇情。」",
        "沈奕恆：「簡單來說，第三人稱（他/她）比較適合敘述劇情、觀察角色。而第一人稱（我）能讓玩家更直接帶入角色的情緒與思考。沉浸式戀愛遊戲常使用第一人稱強化『我正在經歷這段戀情』的感覺。」",
    ])

    q11 = _quiz(
        "沈奕恆：「Q1. 你正在寫一段角色告白的台詞，哪一句最容易讓玩家產生共鳴？」",
        [
            "A. 他看著她，眼神中藏著情緒的風暴。",
            "B. 我看著她，眼神藏不住我胸口洶湧的情緒。",
            "C. 看著她，情緒有點複雜。",
            "D. 她低頭，他看著她沉默。",
        ],
        [5, 10, 0, 5],
        1,
        [
            "沈奕恆：「第三人稱，旁觀感較強。」",
            "沈奕恆（點頭）：「用『我』，讓玩家沒得逃。」",
            "沈奕恆：「過於簡略，情感不夠強烈。」",
            "沈奕恆：「純粹的動作描述，缺乏內心戲。」",
        ],
    )

    q12 = _quiz(
        "沈奕恆：「Q2. 老師說：『視角設計不是技術問題，是情感問題。』這句話的意思是？」",
        [
            "A. 遊戲應該多用鏡頭特效",
            "B. 玩家要能從角色立場感受愛情",
            "C. 劇情要全用旁白描述才合理",
            "D. 玩家應該只看劇情，不做選擇",
        ],
        [5, 10, 5, 0],
        1,
        [
            "沈奕恆：「特效是輔助，核心在於情感傳達。」",
            "沈奕恆：「正確。視角是引導玩家共情的手段。\n主角（murmur）：「原來，不只是寫出來，而是要讓人心裡也動起來……」」",
            "沈奕恆：「旁白過多會削弱代入感。」",
            "沈奕恆：「選擇是互動的核心，能加強情感連結。」",
        ],
    )

    d21 = Dialog(lines=[
        "沈奕恆：「下一個主題：情緒迴圈與內隱選擇設計。讓選擇影響情緒，而不只是劇情走向。」",
        "（下課後，教室只剩你和沈奕恆。他靠著窗邊，手裡拿著飲料吸了一口，然後問了一句：）",
        "沈奕恆：「你喜歡那種選擇題，選 A 就戀愛成功、選 B 就失戀的遊戲嗎？」",
        "你：「那太機械了，沒什麼感覺。」",
        "沈奕恆（露出一抹幾不可見的微笑）：「我也是。真正好的選項……不該告訴你結果，而是讓你去『感覺』角色當下會怎麼想。」",
        "（他走向講台，打開投影機。畫面顯示一個選擇分支圖，每個選項都標示著不同的角色情緒：「尷尬」「愧疚」「微妙喜歡」「不確定」。）",
        "沈奕恆：「這叫『情緒迴圈』，不是給你看到結局的選項，而是讓你在心裡自己走到那個情緒裡。」",
        "你：「所以……我們不是選結局，而是選情緒？」",
        "沈奕恆：「對。感情不是一瞬間發生的，是在一次次細小選擇中，被引導出來的。」",
        "沈奕恆：「所謂『內隱選擇設計』，就是選項表面看起來模糊，但其實暗藏情緒走向，引導玩家『體會』而非『知道』。角色的情緒反應應該連續地影響下一個選擇，而不是重設。」",
        "沈奕恆：「例如，當你問『收到她的訊息，你最自然的反應是？』選項可能是：A. 秒回（可能導致焦慮）；B. 先假裝冷靜（可能導致壓抑）；C. 等她問第二次（可能導致防衛）。這些選項不一定有對錯，但會形塑角色走向哪種情感狀態。」",
    ])

    q21 = _quiz(
        "沈奕恆：「Q1. 你要設計一個讓玩家感受到「被忽略」的戀愛選項，哪一個最有內隱情緒影響力？」",
        [
            "A. 不讀訊息",
            "B. 傳訊息說「晚點再說」",
            "C. 點開對方限動不回訊息",
            "D. 跟對方說「先忙」但其實沒事做",
        ],
        [0, 5, 10, 5],
        2,
        [
            "沈奕恆：「直接不讀，對方可能只是認為你沒看到。」",
            "沈奕恆：「明確告知晚點回，至少有個交代。」",
            "沈奕恆：「是的。這種『已讀不回』式的行為，最能引發被忽略的猜測與不安。\n沈奕恆：「這不是最直接的，但會讓人一直想『他是不是故意的』。這種模糊，才最傷人。」」",
            "沈奕恆：「雖然是欺騙，但表面上還是給了理由。」",
        ],
    )

    q22 = _quiz(
        "沈奕恆：「Q2. 下列哪句敘事最能設計出讓玩家自己體會「遲疑中的心動」？」",
        [
            "A. 我告訴她我喜歡她了。",
            "B. 我本來想傳訊息，結果停在打字框好幾分鐘。",
            "C. 我立刻按下送出鍵。",
            "D. 她走過來，我轉身走開。",
        ],
        [5, 10, 5, 0],
        1,
        [
            "沈奕恆：「這是結果，不是過程中的遲疑。」",
            "沈奕恆：「正確。行動前的猶豫，最能體現內心的波動。\n主角（murmur）：「原來一個卡住的瞬間，也能讓人心臟砰砰跳。」」",
            "沈奕恆：「太果斷了，沒有遲疑的空間。」",
            "沈奕恆：「這是逃避，不是心動的遲疑。」",
        ],
    )

    d31 = Dialog(lines=[
        "沈奕恆：「接著是多重視角與心理張力設計。目標是讓玩家同時理解『角色在想什麼』與『玩家自己在感受什麼』。」",
        "（你和沈奕恆正在進行一項期末練習——用兩種視角寫一段「失約」的劇情：一個是主角被放鴿子的視角，另一個是放鴿子的那方視角。）",
        "（沈奕恆坐在你旁邊，低著頭打字，一言不發。你忍不住偷瞄他的螢幕，上面寫著：）",
        "（螢幕文字：『我明明也想去見他，但我真的不敢。我怕見了他，連保持距離這件事都做不到了。』）",
        "（你心裡一震，剛想開口，他卻突然闔上筆電。）",
        "沈奕恆（語氣平靜）：「多重視角可以讓情感更厚實，但要小心使用。太快揭露，情緒會提早釋放完；太慢揭露，玩家會抽離。」",
        "你：「那你怎麼拿捏？」",
        "沈奕恆（望著窗外）：「靠張力。讓兩個視角的感覺互相矛盾、交錯，但又不完全對立。像一條看不到終點的拉鋸戰，才讓人上癮。」",
        "沈奕恆：「多重視角敘事，就是同時給出『主角視角』與『他人視角』，但資訊不對等，以此營造心理緊繃。心理張力不是用外在衝突製造高潮，而是用『情感的未說出口』與『理解落差』創造壓抑與張力。」",
        "沈奕恆：「例如，玩家知道『某角色其實很在意主角』，但主角卻誤會他冷漠。此時玩家面臨的選擇不是『衝出去表白』，而是『是否忍住、等待』。這類選擇能夠累積心理張力，為後續情感爆發打底。」",
    ])

    q31 = _quiz(
        "沈奕恆：「Q1. 你希望讓玩家在遊戲中同時感受到「他不來」與「他其實很在意」的矛盾效果，應該怎麼設計？」",
        [
            "A. 他傳訊息說「最近很忙」",
            "B. 他沒來，但桌上有一杯還溫熱的咖啡",
            "C. 他直接打來說「別等我」",
            "D. 他在訊息中打了一大串解釋",
        ],
        [0, 10, 5, 5],
        1,
        [
            "沈奕恆：「這是常見的藉口，但缺乏『在意』的暗示。」",
            "沈奕恆：「是的。物品的溫度暗示了他不久前還在，營造了『在意但離開』的矛盾感。\n沈奕恆（低聲）：「溫度留下了他曾經在的證據……比千言萬語更難忘。」」",
            "沈奕恆：「太直接了，沒有留下懸念和矛盾空間。」",
            "沈奕恆：「解釋過多反而可能降低神秘感和張力。」",
        ],
    )

    q32 = _quiz(
        "沈奕恆：「Q2. 你設計了一段兩人吵架的劇情，想讓玩家明白「沈奕恆其實在壓抑情緒」但表面冷靜，應該怎麼寫他的台詞？」",
        [
            "A. 「我沒事，你做什麼都可以。」",
            "B. 「我說了，這件事不重要。」",
            "C. 「……這樣也好，反正我們本來就不該太親近。」",
            "D. 「你想怎樣就怎樣。」",
        ],
        [0, 5, 10, 5],
        2,
        [
            "沈奕恆：「這句話太過順從，不像壓抑，更像放棄。」",
            "沈奕恆：「試圖轉移話題，但『壓抑』的感覺不夠強。」",
            "沈奕恆：「正確。這句話表面看似接受，實則充滿了未說出口的疏離和無奈，體現了壓抑。\n主角（murmur）：「好像真的沒什麼，但哪裡……讓人心裡很悶。」」",
            "沈奕恆：「帶有賭氣的成分，但壓抑的層次感不足。」",
        ],
    )

    d41 = Dialog(lines=[
        "沈奕恆：「討論動態對話系統與角色記憶反應。思考過去的選擇如何影響角色回應。」",
        "（你這幾天跟沈奕恆的對話頻率越來越高。雖然他還是話少，但你總覺得，他好像記得你說過的每一句話。）",
        "（今天在練習互動模擬，你故意輸入一句看似隨機的選項：）",
        "你：「那你會記得我說過的話嗎？」",
        "（沈奕恆愣了一下，然後淡淡地回：）",
        "沈奕恆：「你不是說過你喜歡冷色調的封面設計嗎？我以為你也會比較喜歡這種回應方式。」",
        "（你一時說不出話來。原來，他真的都有記住。）",
        "（老師經過，看見你們的設計稿，點點頭。）",
        "老師：「動態對話不是單純的『選項回應』，而是設計一種『有記憶的角色反應』——你今天對他怎麼說，他明天就會怎麼回答你。」",
        "（沈奕恆看著螢幕，輕聲補一句：）",
        "沈奕恆：「就像……你上次說過你害怕冷場，所以我才會現在主動說話。」",
        "（你忽然覺得胸口有點悶——明明只是程式設計課，為什麼感覺像是在談心？）",
        "沈奕恆：「動態對話系統，就是設計角色會記住玩家選項，並在後續互動中做出相應反應。玩家的行為會影響角色的信任度、態度改變，甚至劇情走向。這能讓角色慢慢記錄下玩家的選擇，使後續的情感爆發更有說服力。」",
        "沈奕恆：「例如，如果玩家曾選擇忽略我提到的壓力，之後我在分組報告時可能會選擇和別人合作。但如果玩家曾主動詢問我的壓力，我之後可能會主動私訊說：『這次報告……我想跟你一組。』」",
    ])

    q41 = _quiz(
        "沈奕恆：「Q1. 你希望讓我根據玩家過去是否「主動關心」來決定是否講真話，哪種設計方式較好？」",
        [
            "A. 設定機率：關心過→30%會講真話",
            "B. 分兩種劇情線：關心過→進入我的回憶事件",
            "C. 讓玩家選項固定，劇情照常發展",
            "D. 加入我說謊的選項，增加趣味性",
        ],
        [5, 10, 0, 5],
        1,
        [
            "沈奕恆：「機率太隨機，無法體現玩家選擇的重要性。」",
            "沈奕恆：「是的。明確的劇情分支能讓玩家感受到選擇的影響力。\n老師：「好設計不靠運氣，而是讓選擇變得值得。」」",
            "沈奕恆：「這樣玩家的選擇就失去意義了。」",
            "沈奕恆：「說謊可以是一種反應，但核心是如何體現『記憶』。」",
        ],
    )

    q42 = _quiz(
        "沈奕恆：「Q2. 你設計了一段對話，想讓玩家從我的反應中感受到我記得過去的互動，哪句台詞最適合？」",
        [
            "A. 「……沒什麼，就照流程走。」",
            "B. 「你那時不是說這樣會讓人沒安全感嗎？」",
            "C. 「嗯，我記不得了。」",
            "D. 「每次都這樣，也挺正常的。」",
        ],
        [0, 10, 5, 5],
        1,
        [
            "沈奕恆：「這句話聽起來很疏離，不像記得。」",
            "沈奕恆：「正確。引用過去的對話，直接體現了記憶。\n主角（murmur）：「他說得很輕……但我記得我講過這句話是在……我們第一次吵架之後。」」",
            "沈奕恆：「直接否認，與目的相反。」",
            "沈奕恆：「這句話比較消極，沒有展現對特定互動的記憶。」",
        ],
    )

    d51 = Dialog(lines=[
        "（這段教學讓「情感記憶」逐漸浮現：沈奕恆雖然不主動，但一點一滴的累積，讓情緒的壓抑變得更真實、更有力。）",
        "沈奕恆：「最後一個模組：情緒崩潰點與玩家代入的情感爆發。目標是了解如何設計情感崩潰點，使玩家能夠深刻體會角色內心的掙扎與解放。」",
        "（這幾天來，你和沈奕恆之間的對話越來越少，氣氛也逐漸變得有些緊張。你注意到，他的眼神變得更冷淡，甚至對你的問題也不再像以前那樣細心回答。）",
        "（這一切似乎是無形中積累的結果，無論是小小的冷場，還是那個不經意的回應，漸漸地他似乎在逃避你。）",
        "（今天你決定找沈奕恆，談一談這段時間的變化。你知道，這場對話可能會決定你們之間的未來。）",
        "你：「這幾天，我注意到你的變化。是不是在刻意疏遠我？」",
        "（沈奕恆心頭一緊，低頭不語。這一刻，他終於體會到你心中的掙扎，原來你也在忍耐。）",
        "沈奕恆：「其實，我在害怕。如果我一直靠近你，會不會讓你覺得負擔？你之前說過你討厭情感依賴，我擔心……會讓你更遠離我。」",
        "（你愣住，眼中閃過一絲迷茫。隨後，你的表情變得更加複雜。）",
        "你：「你以為……我一直保持距離，是因為你依賴我嗎？不，我是因為……我自己不敢再靠近你。」",
        "（沈奕恆感到一陣震驚，這句話像是敲響了他內心的鐘聲。他沒想到，你一直在壓抑自己的情感，將內心的柔軟部分隱藏在冷靜的外表下。）",
        "你（眼神變得堅定）：「這段時間，我一直在想我們之間的關係。每當我接近你，心裡總會有一種莫名的恐懼。那是……我不敢面對的情感。」",
        "（沈奕恆感受到一種強烈的情感波動，這不僅僅是角色之間的對話，更像是心靈深處的碰撞。）",
        "你：「我一直以為，控制情感是最安全的方式，但現在我知道，我不能再繼續這樣逃避下去。」",
        "沈奕恆：「情感爆發點的設計，是情感積壓後的釋放，需注意時機與玩家代入感。我的冷靜與矛盾，其實是一種內心的自我防衛。當情感爆發時，玩家與角色的情感連結會更加緊密。」",
    ])

    q51 = _quiz(
        "沈奕恆：「Q1. 當設計情感崩潰點時，以下哪個元素最能增強情感的爆發力？」",
        [
            "A. 強烈的衝突與對抗",
            "B. 輕描淡寫的反應，讓情感逐漸浮現，最後爆發",
            "C. 一個突然的、戲劇性的事件",
            "D. 玩家無法選擇的情節，讓角色的情感主導一切",
        ],
        [5, 10, 5, 0],
        1,
        [
            "沈奕恆：「直接衝突可能有效，但細膩的鋪陳後爆發，張力更強。」",
            "沈奕恆：「正確。情感的爆發應是逐步累積的，這樣才有足夠的衝擊力。\n老師：「情感的爆發應該是逐步累積的，這樣才有足夠的衝擊力。」」",
            "沈奕恆：「突然事件可以觸發，但情感基礎的鋪墊更為重要。」",
            "沈奕恆：「玩家的選擇和代入感很重要，完全被動可能削弱體驗。」",
        ],
    )

    q52 = _quiz(
        "沈奕恆：「Q2. 若想讓我的情感崩潰更具震撼感，哪種設計最能提升效果？」",
        [
            "A. 讓玩家選擇是否解開我的內心",
            "B. 讓我主動揭示自己的情感過程，帶有回憶的情感描寫",
            "C. 讓我保持冷漠，直到最終揭示內心",
            "D. 讓我在玩家的選擇中始終保持淡定",
        ],
        [5, 10, 5, 0],
        1,
        [
            "沈奕恆：「玩家的選擇很重要，但內心的揭示方式也需考量。」",
            "沈奕恆：「是的。由角色主動、細膩地展現內心轉折，能讓玩家更深地共情。\n主角（murmur）：「這段時間我一直以為他冷漠，沒想到……是他在掙扎、在逃避。」」",
            "沈奕恆：「一直冷漠到最後才揭示，可能鋪陳不足，爆發力不夠。」",
            "沈奕恆：「如果角色始終淡定，就沒有所謂的情感崩潰了。」",
        ],
    )

    good_end = Dialog(type=DialogType.GOODEND, lines=[
        "（你們終於突破了那層無形的障礙，沈奕恆的情感終於被釋放，他不再壓抑自己的情感，兩人之間的關係終於有了突破。）",
        "（你與沈奕恆站在教室窗前，看著外面漸漸暗下來的天空。你們的眼神交會，彼此之間不再有疏離感，只有無言的默契。）",
        "沈奕恆（輕聲）：「或許，我們不需要再理智到冷血。只要你能在我身邊，我就夠了。」",
        "（你們的手指微微碰觸，彼此都感受到對方內心的那份溫暖。）",
        "（畫面漸暗，顯示文字）",
        "「你成功通關了《遊戲程式與戀愛學特訓班》：沈奕恆路線｜攻略達成」",
    ])

    bad_end = Dialog(type=DialogType.BADEND, lines=[
        "（沈奕恆站在你面前，沉默片刻。你能感受到他內心的掙扎，卻依然無法觸及到他的內心。）",
        "沈奕恆（低頭）：「或許，我不應該再繼續這樣逃避。我不擅長表達情感，但這不意味著我不在乎。」",
        "（你聽見他輕聲自語，心中有一種說不清的遺憾。也許，他的心門永遠無法打開，或許，你還需要更長時間來解開他心中的結。）",
        "（畫面轉黑，顯示文字）",
        "「你未能通關《遊戲程式與戀愛學特訓班》：沈奕恆路線｜未攻略成功，但故事還沒結束……？」",
    ])

    return [
        d11, q11, q12, d21, q21, q22, d31, q31, q32,
        d41, q41, q42, d51, q51, q52, good_end, bad_end,
    ]


def init_c(system: DialogSystem, actor: Optional[Actor]) -> NPC:
    """Attach the psychology route to an actor and make it approachable."""
    npc = system.add_npc(actor, route_c_script())
    if npc.actor is not None:
        npc.actor.inv_mass = 0
    npc.in_dialog = False
    npc.route_enabled = True
    return npc