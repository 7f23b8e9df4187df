"""Simplified Chinese translations."""

TRANSLATIONS = {
    # Titles
    "label.title": "听牌分析器",
    "label.subtitle": "向听数 · 手牌分解 · 待牌",
    "label.hand": "手牌",
    "label.discards": "舍牌",
    "label.decompositions": "最优分解",

    # Shanten
    "label.agari": "和了",
    "label.tenpai": "听牌",
    "label.shanten": "{n}向听",

    # Conditions
    "label.condition": "打 {discard} 摸 {waits} 共{n}枚",
    "label.furiten": "振听",
    "label.no_conditions": "没有可用的舍牌",

    # Decomposition parts
    "part.melds": "面子",
    "part.pairs": "对子",
    "part.taatsu": "搭子",
    "part.floating": "浮牌",
    "part.singles": "单张",
    "part.valid": "幺九牌",

    # Patterns
    "pattern.mentsute": "一般形",
    "pattern.chiitoitsu": "七对子",
    "pattern.kokushimusou": "国士无双",

    # Tiles
    "tile.east": "东",
    "tile.south": "南",
    "tile.west": "西",
    "tile.north": "北",
    "tile.haku": "白",
    "tile.hatsu": "发",
    "tile.chun": "中",

    # Prompts and errors
    "prompt.hand": "输入手牌 (例如 123m456p789s東東東白, 空行退出)",
    "error.invalid_hand": "无效手牌: {error}",
    "error.invalid_pool": "无效牌池: {error}",
    "error.analysis": "分析失败: {error}",
    "msg.session_id": "会话 ID: {id}",
    "msg.log_saved": "分析记录已保存: {path}",
}
