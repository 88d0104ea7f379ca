"""Route B: 林夢瑤 teaches romance script writing."""

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


def route_b_script() -> List[Entry]:
    """Fresh entries of the script-writing route, ending with its good and bad endings."""
    d11 = Dialog(lines=[
        "（你剛剛坐下，就被一疊粉紅色的劇本砸到。）",
        "林夢瑤（驚呼）：「啊！對不起對不起！我剛剛想測試拋物線軌跡的感覺，沒想到砸到人了！」",
        "主角：「拋物線……劇本……？這門課到底是來上程式的還是來拍偶像劇的？」",
        "（此時，劉焱成老師大聲宣布：）",
        "老師：「今天開始，我們將進入《戀愛路線模擬與情感選擇架構》模組。你們要做的，就是設計一款讓玩家心跳加速、愛到卡慘死的遊戲。」",
        "林夢瑤（雙眼閃亮）：「這不就是我一直夢想的那種、會讓人忘記現實的戀愛世界嗎？」",
        "（你猶豫了片刻，卻又無法抗拒她的熱情邀請，一起踏上這條粉紅泡泡的學習路線……）",
    ])

    d12 = Dialog(lines=[
        "林夢瑤：「來學習戀愛劇本的心跳公式——情節張力與起承轉合！」",
        "（圖書館801教室，一張堆滿粉紅便條紙的白板上，寫滿了各種劇情模板。林夢瑤手拿馬克筆，正熱血沸騰地畫出愛心箭頭與戀愛三角。）",
        "林夢瑤：「一個讓人上癮的戀愛劇情，不能只是男主遞衛生紙給女主就感天動地好嗎～要有『情緒張力』！有衝突、有誤會、有心動才有價值！這些都要安排在劇本的起承轉合裡！」",
        "主角（murmur）：「這堂課是戀愛心理還是結構寫作⋯⋯？」",
        "林夢瑤：「不！這是心跳設計學！『起』要有獨特邂逅；『承』要鋪陳日常互動；『轉』得來個衝突或誤會；『合』則是高潮與情感昇華。太平凡的戀愛，只會讓玩家點右上角退出。」",
        "（螢幕上彷彿出現了圖解：「戀愛劇本四階段」的字樣。）",
    ])

    q11 = _quiz(
        "林夢瑤：「Q1：哪一個事件最適合安排在『轉』的階段？」",
        [
            "A. 男主遞早餐給女主",
            "B. 女主誤會男主和青梅竹馬交往",
            "C. 男女主角在圖書館第一次相遇",
            "D. 兩人互許心願去看流星雨",
        ],
        [5, 10, 5, 0],
        1,
        [
            "林夢瑤：「這個比較平淡，適合放在『承』喔。」",
            "林夢瑤：「賓果！『轉』就是要這種衝突和誤會，才能讓玩家揪心又想看下去啊～」",
            "林夢瑤：「第一次相遇，當然是『起』點囉！」",
            "林夢瑤：「這個比較像『合』的部分，情感昇華的時刻。」",
        ],
    )

    q12 = _quiz(
        "林夢瑤：「Q2：以下哪個情節最適合當作『起』的開端？」",
        [
            "A. 男女主角在社團吵架",
            "B. 男主為女主擋下掉落的書本",
            "C. 女主看到男主和別人牽手",
            "D. 女主悄悄觀察男主的社群帳號很久",
        ],
        [5, 10, 5, 0],
        1,
        [
            "林夢瑤：「吵架當開頭？也不是不行，但可能比較刺激一點，看你想寫什麼風格！」",
            "林夢瑤：「對嘛！這就是所謂的『瞬間命運感』！一個經典又百看不厭的邂逅方式！」",
            "林夢瑤：「這個比較像『轉』的劇情，製造誤會用的！」",
            "林夢瑤：「嗯...這個當作背景設定可以，但作為開場邂逅，戲劇性不太夠哦。」",
        ],
    )

    d21 = Dialog(lines=[
        "林夢瑤：「接下來是角色性格建構：從 MBTI 到反差萌！」",
        "（隔天清晨，圖書館窗邊灑進一縷光，林夢瑤蹲在角落，一邊看著偶像劇的設定本，一邊激動地在筆記本上畫著人設表。主角靠近時，她突然轉頭，眼神閃爍。）",
        "林夢瑤：「我昨天夢到一個超帥的反社會型男主，他外表冷酷，實際會偷偷幫女主撿掉在地上的補習班傳單……這種『反差』你懂嗎！超級重要的啦！」",
        "主角（murmur）：「反社會型……撿傳單？這是什麼神奇組合……？」",
        "林夢瑤：「來，我們先不講夢了，講理論！角色要有邏輯，但不能無聊！MBTI可以幫你建立角色骨架，但真正讓人愛上的，是那個出其不意的『反差』——比如冷面殺手也會怕蟑螂！」",
        "（她突然舉起一個白板，上面畫了三個角色設定，並用愛心和爆炸圖標標註：）",
        "林夢瑤：「例如，INFJ 看似沉默寡言，但可能私下寫的日記會充滿十頁戀愛妄想。」",
        "林夢瑤：「或者 ENTP，話多又跳Tone，但私底下可能默默做著超細緻的便當。」",
        "林夢瑤：「還有 ISTP，外表冷靜理性，但對戀愛可能毫無經驗，只會模仿電影橋段告白。」",
        "林夢瑤：「看出來了嗎？不是MBTI定一切，而是你怎麼在既有框架裡製造驚喜！這樣角色才會有人氣嘛～」",
    ])

    q21 = _quiz(
        "林夢瑤：「Q3：以下哪一個是常見的「反差萌」設定？」",
        [
            "A. 女主是溫柔體貼型，但其實擅長格鬥",
            "B. 男主是活潑型，經常搞笑又遲到",
            "C. 女主是害羞型，會迴避所有互動",
            "D. 男主是學霸，對感情毫無興趣",
        ],
        [10, 5, 0, 5],
        0,
        [
            "林夢瑤：「沒錯沒錯～反差就是你原本以為她只能溫柔，結果她一拳打飛流氓，這才叫讓人心動嘛！」",
            "林夢瑤：「這個比較像性格一致，反差感不夠強烈喔。」",
            "林夢瑤：「如果只是迴避，可能比較難發展劇情，反差感也不明顯。」",
            "林夢瑤：「這也是一種設定，但『反差』的驚喜感比較少。」",
        ],
    )

    q22 = _quiz(
        "林夢瑤：「Q4：哪個角色設定最有機會吸引喜歡「理性男」的玩家？」",
        [
            "A. INFP，時常情緒波動，夢想成為詩人",
            "B. ESTJ，重視效率，會依照時間表談戀愛",
            "C. ISFP，喜歡自己一個人待在樹下發呆",
            "D. ENFP，每天都有新的戀愛理論想分享",
        ],
        [5, 10, 0, 5],
        1,
        [
            "林夢瑤：「INFP 的感性可能會吸引另一種玩家，但理性男可能比較喜歡條理分明的。」",
            "林夢瑤：「對啊！有些玩家就是吃這套『規則系戀愛』，而且越硬派越有反差潛力，比如他搞不好還會做愛情Excel表格呢！」",
            "林夢瑤：「ISFP 喜歡獨處，可能比較難讓理性男感覺到互動的火花。」",
            "林夢瑤：「ENFP 的熱情很好，但過於發散的理論可能不是理性男的首選。」",
        ],
    )

    d31 = Dialog(lines=[
        "林夢瑤：「接下來的課題是，情緒是糖，節奏是鹽！」",
        "（你與林夢瑤坐在圖書館八樓窗邊，外頭雨滴滴答敲著玻璃，她正翻閱一本標題是《讓你的主角哭得觀眾痛快》的戀愛劇本寫作書。你們要一起學習：如何設計角色的情緒曲線與劇情節奏。）",
        "林夢瑤（雙眼閃亮）：「欸欸，你有發現嗎？所有讓人超級上頭的戀愛劇情——都會有那種『突然好甜！然後下一秒就虐爆』的轉折！你不覺得超帶感嗎？」",
        "主角：「呃……帶感是什麼單位？」",
        "林夢瑤：「拜託，戀愛的節奏就是要像糖鹽混著吃！不能一直甜，也不能一直虐——你要讓觀眾‘以為要親了結果掀桌’，才會尖叫啊～」",
        "（林夢瑤遞給你一本自製筆記，封面還畫了可愛的愛心爆炸圖。）",
        "林夢瑤：「你看，情緒曲線的基本原則是：角色必須經歷變化，不能從頭到尾都一樣開心或傷心。故事節奏要有張力，要有「推進-衝突-釋放」的節拍。最重要的是，給觀眾心理落差，才能產生情感參與！」",
        "林夢瑤：「舉例來說，常見的戀愛節奏安排可以是：誤會 → 傷心 → 再相遇 → 心動 → 誤會再升級 → 大告白 → Happy End。或者更刺激的：突然親上去 → 被打 → 發現對方其實是間諜 → 邊逃亡邊談戀愛！」",
        "林夢瑤：「總之你只要記住：讓角色有情緒曲線，觀眾才會投入啦嘿嘿～」",
    ])

    q31 = _quiz(
        "林夢瑤：「Q5. 以下哪一組情緒曲線更容易讓玩家投入？」",
        [
            "A. 主角從頭到尾都很開心，一路跟女主角打情罵俏，最後順利交往。",
            "B. 主角先討厭女主角→共患難→慢慢理解對方→產生情愫→突發衝突→最後和好。",
            "C. 主角一出場就大告白，然後開始甜蜜膩死人的生活。",
            "D. 主角一直傷心，女主角也沒出現，最後兩人都沒交集。",
        ],
        [5, 10, 5, 0],
        1,
        [
            "林夢瑤：「太順利了啦，少了點波折，玩家可能會覺得不夠深刻喔。」",
            "林夢瑤：「沒錯～因為它包含了「角色成長、情緒起伏、情節反轉」，是最符合情緒曲線設計原則的節奏！」",
            "林夢瑤：「進展太快了！沒有鋪陳的甜蜜，很容易膩的。」",
            "林夢瑤：「這樣太慘了啦，玩家會玩到心累的！」",
        ],
    )

    q32 = _quiz(
        "林夢瑤：「Q6. 如果你要讓觀眾在第六集開始瘋狂嗑糖，你應該在前幾集怎麼安排劇情？」",
        [
            "A. 前五集完全沒互動，第六集直接接吻。",
            "B. 前幾集先鋪梗、互動冷淡、第六集突然有破防小舉動（例如意外牽手）。",
            "C. 前五集瘋狂灑糖，第六集也繼續曬恩愛。",
            "D. 第一集就親、第六集換另一個人親。",
        ],
        [0, 10, 5, 5],
        1,
        [
            "林夢瑤：「這樣太突然了，觀眾會跟不上情緒的！」",
            "林夢瑤：「是的！要讓觀眾感受到「進展」，就要先鋪墊反差，才會在第六集被甜到尖叫！」",
            "林夢瑤：「一直灑糖也不行啦，觀眾會麻木的，要有點起伏才刺激！」",
            "林夢瑤：「換人親？這劇情也太跳躍了吧！雖然...好像也蠻刺激的？」",
        ],
    )

    d41 = Dialog(lines=[
        "林夢瑤：「再來是角色語言風格與台詞設計！」",
        "（圖書館 801教室中，林夢瑤正在拿出一本厚到可以當枕頭的《戀愛遊戲名場面語錄解析》。她一臉興奮地拍了拍你的肩膀）",
        "林夢瑤：「你知道嗎？一個角色的靈魂，其實是藏在她說話的方式裡！講話沒特色，就像告白只說『我喜歡你』——會被當成詐騙訊息！」",
        "（老師從遠方走來，突然一手抽出一張「戀愛語氣診斷表」，像魔法少女變身那樣撒出星光紙片）",
        "劉焱成老師：「設計語言風格，就是設計一種人格的濾鏡！要讓每個角色講話時，玩家能用耳朵分辨出他們的靈魂濃度！」",
        "主角（murmur）：「我昨天夢到自己講話講到被戀愛選項淹沒，最後只能靠一根吸管呼吸……」",
        "林夢瑤（忘我地興奮接話）：「那我們來設計角色的語言人格——有的溫柔、有的傲嬌、有的裝酷、有的講話像機器人，讓每句台詞都能成為玩家截圖的動機！」",
        "林夢瑤：「語言風格，簡單說就是根據角色背景、個性，設計符合角色語調的語句。一句話內盡量包含角色情緒與獨特表達方式。」",
        "林夢瑤：「比方說，溫柔型可能會說：『如果你願意的話……可以陪我一下嗎？』",
        "林夢瑤：「傲嬌型大概是：『才、才不是特地來找你的呢！』",
        "林夢瑤：「搞怪型可能會說：『吃下這顆糖你就得娶我，這是……呃，糖果契約？』",
        "林夢瑤：「機械風型角色則可能說：『資料分析中。感情異常感知提升27%。建議：心動。』這樣！」",
    ])

    q41 = _quiz(
        "林夢瑤：「Q7. 傲嬌型女主角要對男主角告白，但她無法坦率表達。請選出最符合傲嬌語氣的告白句：」",
        [
            "A.「我一直很喜歡你，從第一天就知道了。」",
            "B.「才、才不是特別想每天看到你啦，只是你太礙眼了啦笨蛋……」",
            "C.「你這樣讓我感覺很特別，我想和你試著交往看看。」",
            "D.「你今天還是這麼溫柔，像春天一樣。」",
        ],
        [5, 10, 5, 0],
        1,
        [
            "林夢瑤：「這個太直接了，不像傲嬌會說的話喔。」",
            "林夢瑤：「答對了！傲嬌的精髓就是口是心非，用否定句包裝真心！」",
            "林夢瑤：「這個比較像坦率型的告白，傲嬌通常更彆扭一點。」",
            "林夢瑤：「這是溫柔型或文學少女的台詞吧！」",
        ],
    )

    q42 = _quiz(
        "林夢瑤：「Q8. 你正在設計一個機器人女友角色，她會根據玩家互動變化語調。請選出最能代表她風格的句子：」",
        [
            "A.「嘿，你又遲到了，我可是一直在等你。」",
            "B.「正在辨識……心率異常上升。資料庫標記為『喜歡』。」",
            "C.「你來啦～今天也要努力戀愛唷！」",
            "D.「不、不、不行這樣啦……我會害羞的 >///<」",
        ],
        [5, 10, 5, 0],
        1,
        [
            "林夢瑤：「這個比較像普通女友的抱怨，少了點機械感。」",
            "林夢瑤：「就是這個FEEL！機器人型角色常用理性邏輯來分析情感，超萌的！」",
            "林夢瑤：「這個比較像元氣少女的風格。」",
            "林夢瑤：「這是害羞內向型的角色吧，機器人女友通常更冷靜（表面上）。」",
        ],
    )

    d51 = Dialog(lines=[
        "林夢瑤：「最後一課：結局分歧與玩家影響設計！」",
        "（夜深了，801教室只剩主角與林夢瑤兩人。窗外是靜謐的校園，螢光燈偶爾閃爍。林夢瑤一邊喝著便利商店買來的熱可可，一邊攤開她的戀愛遊戲企劃書。）",
        "林夢瑤：「戀愛遊戲最迷人的地方，不只是誰跟誰在一起…而是『怎麼走到這裡的』。」",
        "主角：「所以……玩家做的每個選擇，會導致不同的结局？」",
        "林夢瑤：「對，這就像是人生分支模擬器，選擇愈多、愈能讓玩家感受到『我影響了這段感情』的重量。」",
        "（老師突然從黑板後面探出頭，像幽靈一樣冷不防地插話：）",
        "劉焱成老師：「結局設計分三種：感情成功 or 失敗，角色改變與否，玩家的自我感受。設計者要問自己一個問題——『結束時，角色和玩家都得到了什麼？』」",
        "林夢瑤：「簡單講，就是讓『在一起』這件事，不是按鈕，而是一段旅程的證明。」",
        "林夢瑤：「結局類型有很多，像是 True Ending，角色與玩家走到深度共鳴；Bad Ending，因選擇錯誤，感情破裂或角色黑化；還有 Neutral Ending，彼此尊重離開，保有好感但不交往。」",
        "林夢瑤：「影響結局的方法，可以用『好感度』或『關鍵選擇』控制分歧。某些對話選項會累積分數，影響角色信任值。甚至可以設計隱藏選項與特定條件才解鎖的True Ending！」",
        "林夢瑤：「情感回饋也很重要，結尾台詞要讓人記住，總結感情旅程。簡單的畫面演出，像煙火、牽手、角色消失等，都能加深記憶。」",
    ])

    q51 = _quiz(
        "林夢瑤：「題目 9. 情境：你要設計一個結局，讓玩家因錯過所有重要選擇導致 Bad Ending，請問哪個選項最能符合「戀愛失敗但角色成長」的路線？」",
        [
            "A. 角色決定轉學，兩人約定下次重逢時再重新開始",
            "B. 玩家在結尾時向角色告白成功，甜蜜牽手",
            "C. 角色消失在遊戲中，玩家找不到任何結局資訊",
            "D. 角色對玩家表示失望，並選擇離開，畫面漸黑",
        ],
        [10, 5, 0, 5],
        0,
        [
            "林夢瑤：「沒錯！這類結局雖未修成正果，但保有角色成長與未來可能性，是成熟的 Bad Ending 設計方式，不讓玩家有過度挫敗感。」",
            "林夢瑤：「這是 Good Ending 吧！題目是 Bad Ending 喔。」",
            "林夢瑤：「這樣玩家會很錯愕耶，連個交代都沒有！」",
            "林夢瑤：「這個比較像是純粹的失敗，角色成長的描寫比較少。」",
        ],
    )

    q52 = _quiz(
        "林夢瑤：「題目 10. 情境：你希望設計一個 True Ending，讓玩家覺得「這場戀愛值得一切努力」。下列哪個演出最有效？」",
        [
            "A. 結尾兩人對話：「所以……我們現在，是戀人了嗎？」",
            "B. 畫面轉黑，只留下「感謝你玩到最後」字樣",
            "C. 兩人一起設計下一款戀愛遊戲，並暗示未來共事",
            "D. 角色給玩家一張紙條，上面寫著「再見」",
        ],
        [5, 0, 10, 5],
        2,
        [
            "林夢瑤：「這個不錯，確認關係是很重要的 момент！」",
            "林夢瑤：「呃，這個有點太敷衍了吧，True Ending 耶！」",
            "林夢瑤：「Bingo！這類結局不只表示戀愛成功，也讓雙方在目標上同步，呈現感情成長與共同前景，是理想 True Ending 設計。」",
            "林夢瑤：「『再見』？這聽起來比較像 Bad Ending 或 Neutral Ending 吧？」",
        ],
    )

    good_end = Dialog(type=DialogType.GOODEND, lines=[
        "（美術系展演空間的角落，活動剛結束，你們坐在地板上，兩人靠得很近）",
        "林夢瑤（輕聲）：「我一開始以為你只是想玩遊戲，沒想到你會陪我把整段劇情走完……還幫我補完那些我不敢寫的情節。」",
        "（你笑了笑，手裡還拿著那份你們一起完成的腳本。）",
        "主角：「因為那是我們兩個的故事，我不想讓它只停留在開頭。」",
        "（林夢瑤垂下眼睫，似乎有點不好意思。）",
        "林夢瑤：「那你覺得……我們的結局該怎麼寫？」",
        "（你望向她的眼睛，語氣認真：）",
        "主角：「這段劇情已經走到True Ending了，不用再選分支了。」",
        "（她愣了一下，然後笑了。）",
        "林夢瑤：「好，那我就把你寫進下一款遊戲裡……寫成一個讓我會心動的NPC。」",
        "（畫面慢慢拉遠，燈光柔和，背景音樂響起）",
        "「你成功通關了《遊戲程式與戀愛學特訓班》：林夢瑤路線｜攻略達成」",
    ])

    bad_end = Dialog(type=DialogType.BADEND, lines=[
        "（空教室，桌面上只剩一張被退件的企劃書，主角靜靜坐著翻閱。黑板上的日期，是課程結束的前一天。）",
        "（你望著那份寫了一半的故事稿，裡面角色的對白停在一次爭吵之後，沒有结局。）",
        "（老師的語音訊息在手機中播放——）",
        "劉焱成老師：「劇本寫到最後，如果沒有情感支撐，那就是一堆流程而已。」",
        "（你輕聲笑了一下，抬頭看著天花板。）",
        "主角（murmur）：「果然還是太急了……想讓她喜歡上我，卻沒寫出她想要的劇情。」",
        "（這時，教室門口傳來熟悉的聲音。）",
        "林夢瑤（語氣平靜）：「我有看到你最近的設計，你有在進步。」",
        "（你轉頭，她正站在門邊，身後是微弱的走廊燈。）",
        "主角：「可是……我沒能幫你完成那個夢想的腳本。」",
        "（林夢瑤沉默了一下，然後遞出一支隨身碟。）",
        "林夢瑤：「那就留下來慢慢寫吧。不為通關，只是想和你……把故事寫完。」",
        "（畫面慢慢轉暗，只剩窗邊微光）",
        "「你未能通關《遊戲程式與戀愛學特訓班》：林夢瑤路線｜未攻略成功，但故事仍在繼續中……」",
    ])

    return [
        d11, d12, q11, q12, d21, q21, q22, d31, q31, q32,
        d41, q41, q42, d51, q51, q52, good_end, bad_end,
    ]


def init_b(system: DialogSystem, actor: Optional[Actor]) -> NPC:
    """Attach the script-writing route to an actor and make it approachable."""
    npc = system.add_npc(actor, route_b_script())
    if npc.actor is not None:
        npc.actor.inv_mass = 0
    npc.in_dialog = False
    npc.route_enabled = True
    return npc