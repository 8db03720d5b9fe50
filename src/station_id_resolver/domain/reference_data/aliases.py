"""Colloquial or ambiguous station names and the name the search service knows them by."""

STATION_ALIASES: dict[str, str] = {
    # Names people drop the "前" from
    "読売ランド": "読売ランド前",
    "よみうりランド": "読売ランド前",
    "都庁": "都庁前",
    "国会議事堂": "国会議事堂前",
    "明治神宮": "明治神宮前",
    "成城学園": "成城学園前",
    "玉川学園": "玉川学園前",
    "相武台": "相武台前",
    "東海大学": "東海大学前",
    # Landmarks and nicknames
    "東京スカイツリー": "とうきょうスカイツリー",
    "スカイツリー": "とうきょうスカイツリー",
    "ディズニーランド": "舞浜",
    "ディズニーシー": "舞浜",
    "ビッグサイト": "東京ビッグサイト",
    "お台場": "お台場海浜公園",
    "羽田空港": "羽田空港第1・第2ターミナル",
    "羽田": "羽田空港第1・第2ターミナル",
    "浜松町・大門": "浜松町",
    # Old or alternative spellings
    "新百合丘": "新百合ヶ丘",
    "百合丘": "百合ヶ丘",
    "市谷": "市ヶ谷",
    "四谷": "四ツ谷",
    "高輪ゲートウエイ": "高輪ゲートウェイ",
    # Hiragana readings of major stations
    "よこはま": "横浜",
    "しぶや": "渋谷",
    "しんじゅく": "新宿",
    "とうきょう": "東京",
    "いけぶくろ": "池袋",
    "うえの": "上野",
    "しながわ": "品川",
    "あきはばら": "秋葉原",
    "はらじゅく": "原宿",
    "えびす": "恵比寿",
    "めぐろ": "目黒",
    "かわさき": "川崎",
    "おおみや": "大宮",
    "ちば": "千葉",
    "たちかわ": "立川",
    "ふなばし": "船橋",
    "きちじょうじ": "吉祥寺",
    "まちだ": "町田",
    "なかの": "中野",
    "むさしこすぎ": "武蔵小杉",
}
