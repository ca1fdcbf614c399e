# backend/app/data/rooms.py
"""
Static room content for the cave.

Each entry is a template; a fresh game copies the ones it uses into its own
RoomState objects, so nothing here is ever mutated at runtime.
"""
from typing import Dict, List

from app.schemas.room import RoomDescription

ROOM_DESCRIPTIONS: List[RoomDescription] = [
    RoomDescription(
        text="You enter a small, damp chamber where glittering minerals wink at you like the eyes of a thousand tiny critics. Among them are unusual salt-like crystals with a subtle blue glow.",
        text_after_collection="You enter a small, damp chamber where glittering minerals continue their staring contest with the darkness. Where you pried loose the glowing salt, a small hole remains.",
        mood="calm",
        perception="That looks like the salt one of the village elders kept by the door. They claimed it warded off evil spirits, though it never worked on tax collectors.",
        interactive_item="cave_salt",
        keywords=["minerals", "glittering", "damp"],
        treasure_clues={
            "ruby": "The ruby glows brightly among glittering minerals that wink like tiny critics.",
            "medallion": "The medallion is half-buried among minerals that sparkle with judgmental gleams.",
            "statue": "The jade figurine sits atop a shelf of glittering minerals, unimpressed by their sparkle.",
            "amulet": "The crystal amulet blends with the winking minerals, playing hide-and-seek.",
        },
    ),
    RoomDescription(
        text="A narrow passage opens to a room where strange mushrooms dangle from the ceiling like a chandelier picked out by someone with questionable taste.",
        mood="mysterious",
        perception="Granny used to say those mushrooms would either cure what ails you or make sure you never ailed again.",
        keywords=["mushrooms", "ceiling", "passage"],
        treasure_clues={
            "ruby": "The ruby pulses rhythmically near mushrooms that dangle like macabre chandeliers.",
            "medallion": "The medallion dangles among strange mushrooms competing for worst decor.",
            "statue": "The jade figurine is nestled between ceiling mushrooms with questionable taste.",
            "amulet": "The crystal amulet hangs near mushrooms that would make any decorator weep.",
        },
    ),
    RoomDescription(
        text="You find yourself in a cavern decorated with ancient cave drawings of strange creatures engaged in either ritual sacrifice or a very aggressive game of charades.",
        enhanced_text="Your lantern reveals more of the ancient drawings: the creatures are hunting humans in organized packs. Symbols around their heads might mean telepathy, or very fancy hats.",
        mood="ancient",
        keywords=["ancient", "drawings", "creatures"],
        treasure_clues={
            "ruby": "The ruby was placed near cave drawings of creatures playing deadly charades.",
            "medallion": "The medallion appears in ancient drawings, possibly as a game prize.",
            "statue": "The jade figurine stands before cave art depicting history's worst party games.",
            "amulet": "The crystal amulet illuminates drawings of what might be charades gone wrong.",
        },
    ),
    RoomDescription(
        text="The room is littered with bones arranged in a pattern that suggests either ritual purpose or a morbid sense of interior decorating. They crunch loudly as you try to step over them.",
        enhanced_text="Your lantern shows tooth marks on the larger bones and fresh scratches in the stone. Something still visits regularly, probably to rearrange the decor.",
        mood="dangerous",
        perception="Some of the bones are from animals. Others had dental work.",
        keywords=["bones", "eating", "dangerous"],
        treasure_clues={
            "ruby": "The ruby rests atop bones arranged by history's most disturbed decorator.",
            "medallion": "The medallion hangs from a skeletal finger in the macabre decor.",
            "statue": "The jade figurine sits among bones like a grim interior design statement.",
            "amulet": "The crystal amulet is clutched by bony fingers with excellent taste in jewelry.",
        },
    ),
    RoomDescription(
        text="You discover the remains of a previous explorer's camp. Their fate is unknown, though the claw marks on the tent suggest they didn't leave a forwarding address.",
        mood="eerie",
        perception="Dark stains on the ground are frozen in time, the signs of a great struggle or the world's most violent interpretive dance.",
        keywords=["camp", "explorer", "remains"],
    ),
    RoomDescription(
        text="Water drips from stalactites with the rhythm of a metronome, creating the most monotonous symphony ever performed in this quiet chamber.",
        mood="peaceful",
        special="waterfall",
        perception="Stalagmites rise from the floor like the slowest construction project on earth. Some are broken. Even rocks have bad days.",
        keywords=["drip", "stalactites", "peaceful"],
    ),
    RoomDescription(
        text="The walls sport dark, root-like tendrils, petrified yet warm to the touch. Something vast once passed through here.",
        mood="tense",
        special="low_pulsing",
        perception="A low pulsing sound comes from everywhere and nowhere. Ghostly footprints appear and vanish just out of sight.",
        keywords=["tendrils", "petrified", "pulsing"],
        treasure_clues={
            "ruby": "The ruby sits among tendrils of petrified spaghetti gone wrong.",
            "medallion": "The medallion hangs from petrified roots that are still oddly warm.",
            "statue": "The jade figurine stands among fossilized tendrils left by something vast.",
            "amulet": "The crystal amulet dangles between roots that suggest a creature with poor timing.",
        },
    ),
    RoomDescription(
        text="The walls of this chamber are unusually warm to the touch. Either there is geothermal activity, or the cave has a fever.",
        mood="warm",
        perception="Sweat beads on your forehead. Anything heavy you are wearing suddenly feels like a very bad idea.",
        keywords=["warm", "walls", "fever"],
        treasure_clues={
            "ruby": "The ruby pulses with heat in a chamber running a geological fever.",
            "medallion": "The medallion feels warm in this cave's feverish embrace.",
            "statue": "The jade figurine seems unbothered by the cave's temperature tantrum.",
            "amulet": "The crystal amulet glows in sympathy with the feverish walls.",
        },
    ),
    RoomDescription(
        text="You find a rusty lantern and mining equipment scattered about like a yard sale nobody bothered to clean up. The miners never returned.",
        text_after_collection="Mining equipment lies scattered about like breadcrumbs leading nowhere. The miners never returned, but their tools remain.",
        mood="abandoned",
        interactive_item="lantern",
        keywords=["lantern", "mining", "equipment"],
    ),
    RoomDescription(
        text="This chamber has an oddly perfect circular shape, as if carved by hands with an obsessive need for geometry and too much time underground.",
        mood="artificial",
        keywords=["circular", "carved", "geometry"],
    ),
    RoomDescription(
        text="Crude writing on the wall reads 'Beware!' followed by seventeen tally marks. Either seventeen people ignored the warning, or one person was very bad at taking hints.",
        mood="warning",
        keywords=["writing", "beware", "tally"],
    ),
    RoomDescription(
        text="The ceiling soars so high your light barely reaches it. Something flutters up there.",
        enhanced_text="Your lantern reaches the distant ceiling and reveals giant bat nests woven from twigs and the remains of souvenir t-shirts.",
        mood="vast",
        perception="The sound of massive wings beating above makes you hope whatever is up there has stage fright.",
        keywords=["ceiling", "vast", "wings"],
    ),
    RoomDescription(
        text="You find a backpack with half-eaten rations. Inside is a map that simply says 'RUN!' in blood, ketchup, or very dramatic red ink.",
        mood="frightening",
        keywords=["backpack", "rations", "run"],
    ),
    RoomDescription(
        text="This chamber is filled with unusual crystals that glow with their own inner light, like mood lighting set permanently to 'ominous'.",
        enhanced_text="Your lantern reveals veins of what might be gold threading through the crystal walls, and glyphs that probably say 'Do Not Touch'.",
        mood="magical",
        special="crystal",
        keywords=["crystals", "glow", "light"],
        treasure_clues={
            "ruby": "The ruby's glow complements nature's pessimistic mood lighting.",
            "medallion": "The medallion is nested among crystals stuck on 'doom' setting.",
            "statue": "The jade figurine stands among crystals broadcasting bad vibes.",
            "amulet": "The crystal amulet blends with formations set to 'ominous ambiance'.",
        },
    ),
    RoomDescription(
        text="You step into a passage with ankle-deep water that is surprisingly warm. Each step splashes like sarcastic applause.",
        mood="watery",
        has_water=True,
        keywords=["water", "ankle", "splash"],
        treasure_clues={
            "ruby": "The ruby sits in water that applauds your poor life choices sarcastically.",
            "medallion": "The medallion lies in water offering mocking ovations.",
            "statue": "The jade figurine stands in water that slow-claps your every step.",
            "amulet": "The crystal amulet hangs above water giving ironic standing ovations.",
        },
    ),
    RoomDescription(
        text="A shallow underground stream cuts through this cavern, flowing from an unknown source with the determination of a river late for an appointment.",
        mood="watery",
        has_water=True,
        special="stream",
        keywords=["stream", "flowing", "water"],
        treasure_clues={
            "ruby": "The ruby rests in a stream rushing to an important water meeting.",
            "medallion": "The medallion glints in a stream with pressing aquatic business.",
            "statue": "The jade figurine stands in water that's clearly double-booked.",
            "amulet": "The crystal amulet dangles above a stream checking its watch.",
        },
    ),
    RoomDescription(
        text="You slip on something and nearly fall. The floor is covered in slime with the consistency of regret.",
        mood="gross",
        keywords=["slime", "slip", "floor"],
    ),
    RoomDescription(
        text="There's a small shrine here decorated with shiny rocks and bottle caps. Cave goblins apparently have the aesthetic sense of magpies.",
        mood="curious",
        special="goblin",
        perception="High-pitched cackles echo around you. The goblins find your presence hilarious.",
        keywords=["shrine", "goblin", "offerings"],
    ),
    RoomDescription(
        text="A table with cards and chips is scattered about. Even cave dwellers enjoy poker night, though the stakes seem to involve teeth.",
        mood="humorous",
        keywords=["cards", "poker", "table"],
        treasure_clues={
            "ruby": "The ruby serves as a chip in a game where teeth are currency.",
            "medallion": "The medallion sits beside stakes involving dental work and damnation.",
            "statue": "The jade figurine watches over poker where souls are small blinds.",
            "amulet": "The crystal amulet hangs above a game with existential stakes.",
        },
    ),
    RoomDescription(
        text="Massive crystal columns stretch from floor to ceiling, refracting your light in dazzling patterns.",
        mood="magical",
        special="crystal",
        perception="The crystals sing faintly when you pass near them, a hum that makes your eyelids heavy.",
        keywords=["crystal", "columns", "refracting"],
    ),
    RoomDescription(
        text="This chamber has a perfect echo. You whisper 'hello' and it answers 'SILENCE! I'll make you my pet!' That is not how echoes work.",
        enhanced_text="Your lantern reveals spiral carvings on the walls that amplify and distort every sound like a demonic karaoke machine.",
        mood="unsettling",
        special="echo",
        keywords=["echo", "whisper", "acoustics"],
    ),
    RoomDescription(
        text="A cave painting shows a stick figure being carried off by a giant bat. The artist clearly had both talent and trauma.",
        mood="ominous",
        keywords=["painting", "bat", "stick figure"],
    ),
    RoomDescription(
        text="This part of the cave has flooded with cold water that soaks through your boots with the determination of a debt collector.",
        mood="cold",
        has_water=True,
        perception="Your teeth start chattering a rhythm your ancestors would call a warning.",
        keywords=["flooded", "cold", "boots"],
    ),
    RoomDescription(
        text="Strange rock formations here look suspiciously like furniture. Either nature has been redecorating, or someone had far too much time to arrange rocks.",
        mood="quirky",
        keywords=["formations", "furniture", "rocks"],
    ),
    RoomDescription(
        text="A pile of shiny trinkets sits in the corner, collected by something with the instincts of a crow. One particularly enticing white golden bauble catches your eye.",
        text_after_collection="A pile of shiny trinkets sits in the corner, one fewer than before.",
        mood="interesting",
        special="trinkets",
        interactive_item="shiny_trinkets",
        keywords=["trinkets", "shiny", "collection"],
        treasure_clues={
            "ruby": "The ruby hides among trinkets collected by an organized crow-person.",
            "medallion": "The medallion is the crown jewel of a kleptomaniac's collection.",
            "statue": "The jade figurine stands among items curated by a compulsive collector.",
            "amulet": "The crystal amulet blends with shinies hoarded by a methodical magpie.",
        },
    ),
    RoomDescription(
        text="The floor here is covered in soft sand that swirls mysteriously from the center, almost comfortable enough for a nap if you ignore the swirling.",
        mood="tempting",
        special="sand_creature",
        keywords=["sand", "soft", "comfortable"],
    ),
    RoomDescription(
        text="You find what looks like a cave gift shop complete with 'I survived the Ancient One's Caves' t-shirts, now half off, like your chances of survival.",
        mood="humorous",
        special="gift",
        perception="Very cheesy music of some horrible type is coming from the walls.",
        keywords=["gift-shop", "t-shirts", "humorous"],
    ),
    RoomDescription(
        text="A frozen section where delicate ice formations hang from the ceiling like a chandelier bought at a discount store by someone fond of sharp objects.",
        mood="cold",
        perception="Your breath forms clouds that seem to spell out 'BAD IDEA' before fading away.",
        keywords=["ice", "frozen", "cold"],
    ),
    RoomDescription(
        text="Luminescent fungi crawl across the walls, giving off an eerie blue-green glow that would be pretty if it were not so obviously plotting something.",
        enhanced_text="Your lantern shows the fungi arranged in deliberate patterns, converging on a small opening in the wall.",
        mood="otherworldly",
        special="fungi_creature",
        perception="The glowing fungi pulse like a visible heartbeat. Your skin tingles.",
        keywords=["fungi", "luminescent", "glow"],
        treasure_clues={
            "ruby": "The ruby's glow complements fungi running nature's evil screensaver.",
            "medallion": "The medallion hangs among fungi clearly plotting luminous schemes.",
            "statue": "The jade figurine watches fungi crawl with obvious malicious intent.",
            "amulet": "The crystal amulet refracts light from conspiratorial fungi.",
        },
    ),
    RoomDescription(
        text="This chamber contains a small, tranquil pool reflecting the ceiling like a perfect mirror. A cool bioluminescent glow rises from the water.",
        mood="peaceful",
        has_water=True,
        special="water_spirit",
        perception="Something watches you with the patience of a cat at a mouse hole, only wetter.",
        keywords=["tranquil", "mirror", "reflection"],
    ),
    RoomDescription(
        text="The unmistakable scent of sulfur fills this chamber. Yellow sulfur crystals line the walls like evil butterscotch.",
        enhanced_text="Your lantern shows old mining cart tracks and particularly large sulfur crystals that seem to glow with malice.",
        text_after_collection="The scent of sulfur still permeates this chamber. The walls where you removed the crystals bring tears to your eyes.",
        mood="acrid",
        perception="Your eyes water from the mineral vapors rising through cracks in the floor.",
        interactive_item="sulfur_crystal",
        keywords=["sulfur", "yellow", "scent"],
        treasure_clues={
            "ruby": "The ruby glows beside crystals of hellish butterscotch.",
            "medallion": "The medallion hangs in nature's failed aromatherapy chamber.",
            "statue": "The jade figurine stands among evil candy crystal formations.",
            "amulet": "The crystal amulet's clarity mocks the sulfurous butterscotch walls.",
        },
    ),
    RoomDescription(
        text="A pool of clear water covers most of the floor, making the most inconvenient wading pool in the world. Something glitters at the bottom.",
        text_after_collection="A pool of clear water covers most of the floor. Whatever glittered at the bottom is gone.",
        mood="watery",
        has_water=True,
        interactive_item="fools_gold",
        keywords=["pool", "clear", "glitter"],
        treasure_clues={
            "ruby": "The ruby glows in water sending rippled warnings in liquid morse.",
            "medallion": "The medallion creates ripples spelling aquatic doom prophecies.",
            "statue": "The jade figurine stands in nature's most passive-aggressive pool.",
            "amulet": "The crystal amulet reflects warnings written in water language.",
        },
    ),
    RoomDescription(
        text="An ornate dagger lies on a flat stone as if placed there for a ceremony that never finished.",
        text_after_collection="A flat stone sits in the middle of the room, a faint outline where a dagger once lay.",
        mood="eerie",
        interactive_item="utility_knife",
        keywords=["dagger", "stone", "ceremony"],
    ),
    RoomDescription(
        text="A skeleton slumps against the wall, still wearing an exotic bracelet that catches your light.",
        text_after_collection="A skeleton slumps against the wall, looking a little less accessorized.",
        mood="unsettling",
        interactive_item="tarnished_bracelet",
        keywords=["skeleton", "bracelet", "wall"],
    ),
    RoomDescription(
        text="Loose rocks cover the floor of this cramped passage. Some of them are oddly soft and chalky.",
        text_after_collection="A cramped passage with a few ordinary rocks on the floor.",
        mood="whimsical",
        interactive_item="loose_rocks",
        keywords=["rocks", "loose", "passage"],
    ),
]

# The shifting room cycles through these when it is not anchored.
SHIFTING_ROOM_FALLBACKS: List[RoomDescription] = [
    RoomDescription(
        text="A chamber where the walls hum a tune you can't quite place. Occasionally someone seems to hum along, slightly off-key.",
        mood="mysterious",
        perception="The humming sounds almost like someone trying to remember a spell.",
    ),
    RoomDescription(
        text="Crystalline formations on the ceiling spell out 'HELP ME' in flowery script. Below it someone carved 'OR DON'T, I'M NOT YOUR BOSS' in angrier letters.",
        mood="mysterious",
        special="echo",
        perception="Someone here has a complicated relationship with visitors.",
    ),
    RoomDescription(
        text="A failed attempt at cave art shows stick figures that might be dancing. A note scratched below reads: 'Art was never my strong suit - W'",
        mood="humorous",
        perception="The 'W' signature appears in several places, always followed by self-deprecating comments.",
    ),
    RoomDescription(
        text="The walls are covered in tally marks that stop at 10,847. A final note says: 'Stopped counting. Realized I AM the cave now. This is fine.'",
        mood="unsettling",
        perception="Whoever was counting had an existential crisis around day 10,847.",
    ),
    RoomDescription(
        text="A small shrine to 'The God of Lost Things' holds single socks, pen caps and a note: 'My sanity - if found, return to the wizard trapped in the cave.'",
        mood="whimsical",
        perception="Well, that's surprisingly direct about the wizard situation.",
    ),
]

HIDDEN_CHAMBER_TEXT = "A hidden chamber untouched for centuries. The air is thick with dust and mystery. Ancient artifacts, a sarcophagus and strange symbols cover the walls."
HIDDEN_CHAMBER_EMPTY_TEXT = HIDDEN_CHAMBER_TEXT + " Empty pedestals and shelves show where ancient treasures once rested."

WIZARD_SANCTUM_TEXT = (
    "You materialize in a circular sanctum lined with bookshelves. In the center stands a stone pedestal with a "
    "fist-sized hollow. A voice echoes from the walls: 'Place the stone of the earth within the arcane, and I shall be free!'"
)
WIZARD_SANCTUM_FREED_TEXT = (
    "The sanctum is quiet now. A rock sits in the pedestal hollow, and where the wizard's voice once echoed, "
    "a polished sphere of glassy stone rests on a shelf."
)

SECRET_ROOM_CONTENTS: List[Dict[str, str]] = [
    {
        "id": "loose_rocks",
        "name": "Loose Cave Rock",
        "description": "A hand-sized, dull, grayish-white loose rock. It might be useful even though it feels soft.",
    },
    {
        "id": "single_gold_coin",
        "name": "Ancient Wyrm Coin",
        "description": "A single ancient gold coin, worn but still valuable.",
    },
    {
        "id": "druika_repellent",
        "name": "Ancient Vial",
        "description": "A bubbling vial of strange green liquid. The label reads 'Reek of the Ancients'.",
    },
    {
        "id": "wizard_journal",
        "name": "Wizard's Journal",
        "description": "A leather-bound journal with notes like 'Day 423: Still can't figure out why the water nixie keeps winning at poker.'",
    },
]

SANCTUM_CONTENTS: List[Dict[str, str]] = [
    {
        "id": "observatory",
        "name": "Ancient Observatory",
        "description": "Strange devices track the movements of celestial bodies. Star charts seem to mark the locations of powerful artifacts.",
    },
    {
        "id": "wizard_notes",
        "name": "Wizard's Study",
        "description": "A cluttered desk holds scrolls with notes like 'Remember to feed the basilisks on Thursday'.",
    },
    {
        "id": "half_eaten_sandwich",
        "name": "Wizard's Snack",
        "description": "A half-eaten sandwich sits on a plate with a note: 'Property of Evil Cave Wizard - DO NOT TOUCH'.",
    },
]

DOOR_FEATURES = [
    "the rock formations",
    "ancient carvings",
    "moss-covered stones",
    "stalactites",
    "the cave wall",
    "faded pictographs",
]


def get_all_room_descriptions() -> List[RoomDescription]:
    return [room.model_copy(deep=True) for room in ROOM_DESCRIPTIONS]


def get_room_descriptions_by_special(special: str) -> List[RoomDescription]:
    return [room.model_copy(deep=True) for room in ROOM_DESCRIPTIONS if room.special == special]
