# backend/app/data/items.py
from typing import Dict, List

from app.schemas.item import ItemType

ITEM_TYPES: Dict[str, ItemType] = {
    "rusty_key": ItemType(
        id="rusty_key",
        name="Rusty Key",
        description="A giant, ancient looking rusty key that would unlock a really big door. It is heavy.",
    ),
    "crystal_orb": ItemType(
        id="crystal_orb",
        name="Crystal Orb",
        description="A mysterious crystal orb. It could be anything from a magical hearing device to a teleportation device.",
    ),
    "old_map": ItemType(
        id="old_map",
        name="Faded Parchment",
        description="A torn piece of an old parchment, or even a map.",
    ),
    "lantern": ItemType(
        id="lantern",
        name="Old Lantern",
        description="An old and rusty mining lantern with strange glyphs on it.",
        fuel=10,
        max_fuel=10,
    ),
    "spellbook": ItemType(
        id="spellbook",
        name="Ancient Spellbook",
        description="The arcane symbols seem to actively avoid your gaze.",
    ),
    "golden_compass": ItemType(
        id="golden_compass",
        name="Golden Compass",
        description="A needle with no arrow, and some sort of symbol on the top edge.",
        uses=3,
    ),
    "druika_repellent": ItemType(
        id="druika_repellent",
        name="Ancient Vial",
        description="An ancient vial with a repugnant smell emanating from it. It reeks.",
    ),
    "wizard_journal": ItemType(
        id="wizard_journal",
        name="Wizard's Journal",
        description="A leather-bound journal filled with bizarre diagrams and complaints about a water nixie who cheats at poker.",
    ),
    "invisibility_cloak": ItemType(
        id="invisibility_cloak",
        name="Tattered Winter Cloak",
        description="A tattered cloak that clearly lost a fight with something bitey. It tingles when you touch it.",
        equippable=True,
    ),
    "torch_oil": ItemType(
        id="torch_oil",
        name="Torch Oil Flask",
        description="A leather-wrapped container filled with thick, slow-burning oil.",
        quantity=1,
    ),
    "gold_coins": ItemType(
        id="gold_coins",
        name="Ancient Wyrm Coins",
        description="A handful of ancient gold coins.",
        can_use=False,
        value=10,
    ),
    "single_gold_coin": ItemType(
        id="single_gold_coin",
        name="Ancient Wyrm Coin",
        description="A single ancient gold coin, worn but still valuable.",
        can_use=False,
        value=1,
    ),
    "reality_stabilizer": ItemType(
        id="reality_stabilizer",
        name="Crystalline Rock",
        description="A strange crystalline rock that looks oddly like an anchor.",
        can_use=False,
    ),
    "loose_rocks": ItemType(
        id="loose_rocks",
        name="Loose Cave Rock",
        description="A hand-sized, dull, grayish-white loose rock. It feels soft.",
    ),
    "cave_salt": ItemType(
        id="cave_salt",
        name="Cave Salt Crystal",
        description="A strange glittering crystal. It might repel evil spirits.",
        duration=5,
    ),
    "sulfur_crystal": ItemType(
        id="sulfur_crystal",
        name="Sulfur Crystal",
        description="A fragile yellow crystal with a repelling, pungent odor.",
        moves_remaining=10,
    ),
    "wyrmglass": ItemType(
        id="wyrmglass",
        name="Wyrmglass",
        description="A polished sphere of glassy stone, cold to the touch. Its surface reflects nothing behind you.",
    ),
    "shiny_trinkets": ItemType(
        id="shiny_trinkets",
        name="Shiny White Golden Bauble",
        description="An irresistibly shiny trinket that practically begs to be picked up.",
        can_use=False,
        is_trap=True,
    ),
    "fools_gold": ItemType(
        id="fools_gold",
        name="Fake Coins",
        description="Cleverly painted stones. The 'gold' rubs off on your fingers.",
        can_use=False,
        is_cursed=True,
    ),
    "utility_knife": ItemType(
        id="utility_knife",
        name="Ornate Dagger",
        description="A small knife with a bat-shaped hilt. More decorative than dangerous.",
        can_use=False,
        is_cursed=True,
    ),
    "tarnished_bracelet": ItemType(
        id="tarnished_bracelet",
        name="Exotic Bracelet",
        description="A heavy bracelet of some unidentifiable metal. It smells vaguely of fish.",
        can_use=False,
        is_cursed=True,
    ),
    "wumpus_tshirt": ItemType(
        id="wumpus_tshirt",
        name="Wumpus Cave T-shirt",
        description="A tacky souvenir t-shirt that reads 'I Survived Ye Olde Ancient Cave!'",
        equippable=True,
    ),
    "souvenir_mug": ItemType(
        id="souvenir_mug",
        name="Cave Explorer Mug",
        description="A ceramic mug with 'DON'T WAKE THE WUMPUS' printed on the side.",
    ),
    "canvas_bag": ItemType(
        id="canvas_bag",
        name="Adventure Canvas Bag",
        description="A sturdy souvenir canvas bag printed with a cave map (not this cave).",
    ),
    "druika_plush": ItemType(
        id="druika_plush",
        name="Plush Druika Toy",
        description="A cuddly stuffed version of the terrifying ancient cave monster.",
    ),
}

# Item id -> price in coins.
GIFT_SHOP_CATALOG: Dict[str, int] = {
    "druika_repellent": 5,
    "lantern": 4,
    "old_map": 5,
    "torch_oil": 3,
    "invisibility_cloak": 6,
    "wumpus_tshirt": 1,
    "souvenir_mug": 1,
    "canvas_bag": 2,
    "druika_plush": 2,
}

GIFT_SHOP_ONLY_ITEMS = ["wumpus_tshirt", "souvenir_mug", "canvas_bag", "druika_plush"]

NON_PURCHASABLE_ITEMS = ["reality_stabilizer", "cave_salt", "spellbook", "golden_compass", "sulfur_crystal"]

SHOP_PURCHASE_LINES: Dict[str, str] = {
    "druika_repellent": "\"Ahh, now this came from a guy who didn't need it fast enough,\" the shopkeeper chuckles, handing you a vial of Reek of the Ancients.",
    "lantern": "\"Found this in the 'lost and found' bin. Previous owner won't be needing it,\" the shopkeeper says with a wink, giving you an old mining lantern.",
    "old_map": "\"Some previous adventurer sold this to buy a t-shirt. Poor life choices,\" the shopkeeper remarks, passing you a faded map fragment.",
    "torch_oil": "\"Our bestseller,\" says the shopkeeper, handing you a flask of torch oil.",
    "invisibility_cloak": "\"Some tattered old cloak I no longer need,\" the shopkeeper says, giving you a musty cloak covered in bite marks.",
    "wumpus_tshirt": "\"This is my most popular item!\" the shopkeeper beams, handing you a garish t-shirt with a cartoon Druika on it.",
    "souvenir_mug": "\"A bestseller with the tourists. Not that I get many,\" the shopkeeper says, wrapping a mug in some paper.",
    "canvas_bag": "\"Perfect for carrying all your cave treasures, if the cave doesn't swallow you first!\" the shopkeeper says, folding up a canvas bag.",
    "druika_plush": "\"Kids just love these!\" the shopkeeper grins, handing you a surprisingly cute plush Druika.",
}

TREASURE_TYPES: List[Dict[str, str]] = [
    {
        "id": "ruby",
        "name": "Ancient Ruby",
        "description": "A deep red gem that pulses with strange energy.",
        "clue": "Look for a crimson glint where the shadows gather thickest.",
    },
    {
        "id": "medallion",
        "name": "Gold Medallion",
        "description": "A large gold medallion engraved with unknown symbols.",
        "clue": "Something golden rests where the echoes of the old ones linger.",
    },
    {
        "id": "statue",
        "name": "Jade Figurine",
        "description": "A small jade carving of a humanoid creature you don't recognize.",
        "clue": "A small green watcher hides among the stones, keeping its silent vigil.",
    },
    {
        "id": "amulet",
        "name": "Crystal Amulet",
        "description": "An amulet made entirely of clear crystal. It seems important.",
        "clue": "Clear as water, hard as stone, it waits where the light bends strangely.",
    },
]

MAP_PURPOSES = [
    "danger_sense",
    "secret_door",
    "druika_tracker",
    "flask_finder",
    "treasure_enhancer",
    "disintegrate",
    "cursed",
    "room_revealer",
    "gold_finder",
]
