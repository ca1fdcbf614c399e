# backend/tests/game_logic/test_room_data.py
from app.data.items import TREASURE_TYPES
from app.data.rooms import ROOM_DESCRIPTIONS, get_all_room_descriptions, get_room_descriptions_by_special


def test_descriptions_by_special_only_returns_that_special():
    crystals = get_room_descriptions_by_special("crystal")

    assert len(crystals) == sum(1 for room in ROOM_DESCRIPTIONS if room.special == "crystal")
    assert crystals
    assert all(room.special == "crystal" for room in crystals)


def test_descriptions_by_special_are_copies():
    """
    GIVEN the gift shop description from the catalogue
    WHEN a caller changes the copy it was handed
    THEN the catalogue entry is untouched.
    """
    # Arrange
    gift = get_room_descriptions_by_special("gift")[0]
    original = next(room for room in ROOM_DESCRIPTIONS if room.special == "gift")

    # Act
    gift.text = "Redecorated."
    gift.keywords.append("vandalised")

    # Assert
    assert original.text != "Redecorated."
    assert "vandalised" not in original.keywords


def test_unknown_special_has_no_descriptions():
    assert get_room_descriptions_by_special("dragon_hoard") == []


def test_all_descriptions_are_copies():
    rooms = get_all_room_descriptions()
    assert len(rooms) == len(ROOM_DESCRIPTIONS)
    assert all(copy is not original for copy, original in zip(rooms, ROOM_DESCRIPTIONS))


def test_room_treasure_clues_name_real_treasures():
    treasure_ids = {treasure["id"] for treasure in TREASURE_TYPES}
    rooms_with_clues = [room for room in ROOM_DESCRIPTIONS if room.treasure_clues]

    assert rooms_with_clues
    for room in rooms_with_clues:
        assert set(room.treasure_clues) == treasure_ids
