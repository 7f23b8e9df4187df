"""Japanese translations."""

TRANSLATIONS = {
    # Titles
    "label.title": "待ち分析",
    "label.subtitle": "向聴数 · 手牌分解 · 待ち",
    "label.hand": "手牌",
    "label.discards": "捨て牌",
    "label.decompositions": "最善の分解",

    # Shanten
    "label.agari": "和了",
    "label.tenpai": "聴牌",
    "label.shanten": "{n}向聴",

    # Conditions
    "label.condition": "打 {discard} 摸 {waits} 残り{n}枚",
    "label.furiten": "フリテン",
    "label.no_conditions": "有効な打牌はありません",

    # Decomposition parts
    "part.melds": "面子",
    "part.pairs": "対子",
    "part.taatsu": "搭子",
    "part.floating": "浮き牌",
    "part.singles": "単騎",
    "part.valid": "么九牌",

    # Patterns
    "pattern.mentsute": "面子手",
    "pattern.chiitoitsu": "七対子",
    "pattern.kokushimusou": "国士無双",

    # Tiles
    "tile.east": "東",
    "tile.south": "南",
    "tile.west": "西",
    "tile.north": "北",
    "tile.haku": "白",
    "tile.hatsu": "發",
    "tile.chun": "中",

    # Prompts and errors
    "prompt.hand": "手牌を入力 (例: 123m456p789s東東東白, 空行で終了)",
    "error.invalid_hand": "無効な手牌: {error}",
    "error.invalid_pool": "無効な見え牌: {error}",
    "error.analysis": "分析に失敗しました: {error}",
    "msg.session_id": "セッション ID: {id}",
    "msg.log_saved": "分析ログを保存しました: {path}",
}
