# backend/app/data/messages.py
import random
from typing import Dict, List

# --- Hazard perceptions (reported when a hazard is in an adjacent room) ---
WUMPUS_NEARBY = "You smell something terrible nearby..."
PIT_NEARBY = "You feel a draft coming from somewhere close..."
BAT_NEARBY = "You hear wings flapping in the darkness..."
EXIT_NEARBY = "You feel a fresh breeze. The exit must be nearby!"

# --- Perceptions for the special type of the room the player is standing in ---
SPECIAL_ROOM_PERCEPTIONS: Dict[str, str] = {
    "crystal": "You can hear a peaceful, ethereal melody emanating from the glowing crystals.",
    "echo": "The air feels charged with an unnatural presence. Whispers seem to surround you.",
    "waterfall": "The gentle patter of water droplets creates a soothing natural melody all around you.",
    "goblin": "You hear high-pitched cackles echoing from the shadows. Cave goblins seem to be watching your every move.",
    "stream": "The soothing sound of running water fills the cavern. The stream continues into darkness beyond your light.",
    "trinkets": "The trinkets seem to glimmer with a magical quality. Some are clearly not of human origin.",
    "hidden_chamber": "Ancient symbols on the walls seem to shift and change as you look at them. This place feels untouched by time.",
    "sand_creature": "You feel an unsettling sensation, as if you're being watched and stalked.",
    "water_spirit": "You sense a gentle presence, something intelligent observing you with curiosity.",
    "fungi_creature": "The glowing fungi seem to pulse slightly in rhythm, like a breathing organism. You feel a tingling sensation on your skin.",
}

QUIET_THOUGHTS: List[str] = [
    "It's quiet. Too quiet. You find yourself missing the village gossip.",
    "You wonder if anyone back home has noticed you're gone. Probably not.",
    "The silence is so complete you can hear your own heartbeat, and it sounds nervous.",
    "You realize you never asked how big this cave actually is.",
    "A drop of water lands on your neck. You decide to believe it was water.",
    "You briefly consider a career change. Something with more sunlight.",
]

CAVE_MESSAGES: List[str] = [
    "Turn back while you still can...",
    "The treasures are not yours to take...",
    "The Druika remembers everyone who enters...",
    "Count your steps, adventurer. The cave does.",
    "Gold glitters brightest just before the fall...",
    "The wizard was once a visitor too...",
    "Not every breeze leads to the surface...",
    "Light your way, or the darkness will light it for you...",
]

CAVE_SILENCE_MESSAGE = "The whispers that have followed you through the cave fall silent. Whatever voice haunted these tunnels is finally at peace."

COIN_DIALOGUE: List[str] = [
    "The goblin's eyes go wide at the glint of your coins. \"Wyrm coins! Haven't seen those since the Serpent Kings!\"",
    "\"Ooh, ancient gold,\" the goblin croaks, rubbing its hands together. \"Let's do business.\"",
    "The goblin bites one of your coins, winces, and grins. \"Real. Very real. Come, come!\"",
    "\"One guy came in, bought five torches and a cursed mug, and walked into the cave singing. Never saw him again,\" the goblin muses. \"What can I get you?\"",
]

COIN_LORE = (
    "The coins bear the coiled image of a great wyrm, carved with a skill no village smith could match. "
    "Legend says the Serpent Kings minted them before the mountain swallowed their halls, and that the "
    "beast below still counts every one."
)

DEATH_MESSAGES: Dict[str, str] = {
    "wumpus": "The Druika got you.",
    "pit1": "Gravity always wins.",
    "pit2": "Gravity always wins.",
    "pit": "Gravity always wins.",
    "torch_darkness": "The darkness swallowed you whole.",
    "lantern_darkness": "The darkness swallowed you whole.",
    "sand_creature": "The sand keeps what it takes.",
    "nixie_rage": "Never anger a water nixie.",
    "heat": "You cooked in your own cloak.",
    "cold": "You froze in the dark.",
    "curse": "Some parchments are better left unread.",
    "magical_catastrophe": "Magic and lantern oil do not mix.",
    "dysentery": "You have died of dysentery.",
    "stupidity": "Reading the instructions would have helped.",
    "ladder_trap": "The ladder was a trap for the overconfident.",
    "trinket_trap": "Shiny things are bait.",
    "cursed_items": "Cursed items do not play well together.",
    "sulfur_explosion": "Cursed items do not play well together.",
    "fungi": "The fungi found you delicious.",
    "crystal_sleep": "You will sleep in the crystal song forever.",
    "night_crawlers": "The night crawlers came for you.",
    "wizard_room_trapped": "You became part of the wizard's decor.",
    "wizard_room_absorbed": "The sanctum absorbed you.",
}


def get_random_cave_message() -> str:
    return random.choice(CAVE_MESSAGES)


def get_random_quiet_thought() -> str:
    return random.choice(QUIET_THOUGHTS)


def get_random_coin_dialogue() -> str:
    return random.choice(COIN_DIALOGUE)
