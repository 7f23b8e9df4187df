"""English translations."""

TRANSLATIONS = {
    # Titles
    "label.title": "Wait Analyzer",
    "label.subtitle": "Shanten · Decompositions · Waits",
    "label.hand": "Hand",
    "label.discards": "Discards",
    "label.decompositions": "Best decompositions",

    # Shanten
    "label.agari": "Complete",
    "label.tenpai": "Tenpai",
    "label.shanten": "{n}-shanten",

    # Conditions
    "label.condition": "Discard {discard}, wait on {waits} ({n} left)",
    "label.furiten": "furiten",
    "label.no_conditions": "No useful discard",

    # Decomposition parts
    "part.melds": "Melds",
    "part.pairs": "Pairs",
    "part.taatsu": "Partial runs",
    "part.floating": "Floating",
    "part.singles": "Singles",
    "part.valid": "Orphans",

    # Patterns
    "pattern.mentsute": "Standard",
    "pattern.chiitoitsu": "Seven Pairs",
    "pattern.kokushimusou": "Thirteen Orphans",

    # Tiles
    "tile.east": "E",
    "tile.south": "S",
    "tile.west": "W",
    "tile.north": "N",
    "tile.haku": "Wh",
    "tile.hatsu": "Gr",
    "tile.chun": "Rd",

    # Prompts and errors
    "prompt.hand": "Enter a hand (e.g. 123m456p789s東東東白, blank line to quit)",
    "error.invalid_hand": "Invalid hand: {error}",
    "error.invalid_pool": "Invalid tile pool: {error}",
    "error.analysis": "Analysis failed: {error}",
    "msg.session_id": "Session ID: {id}",
    "msg.log_saved": "Analysis log saved: {path}",
}
