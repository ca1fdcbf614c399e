# backend/tests/api/v1/test_command_endpoint.py
import uuid
from unittest.mock import patch

import pytest

from app.game_logic.inventory import add_item_to_inventory
from app.game_state import get_game, register_game


@pytest.fixture
def session(game_state):
    register_game(game_state)
    return game_state


def send(test_client, state, command):
    return test_client.post(f"/api/v1/command/{state.session_id}", json={"command": command})


@patch("app.game_logic.movement.random.random", return_value=0.99)
def test_room_number_moves_player(mock_random, test_client, session):
    response = send(test_client, session, "2")

    assert response.status_code == 200
    body = response.json()
    assert body["game"]["current_position"] == 2
    assert body["location_update"]["new_position"] == 2
    assert body["message_to_player"].startswith("You are now in room 2.")
    assert body["game_over"] is False


@patch("app.game_logic.movement.random.random", return_value=0.99)
def test_go_command_moves_player(mock_random, test_client, session):
    body = send(test_client, session, "go 30").json()
    assert body["game"]["current_position"] == 30


def test_unreachable_room(test_client, session):
    body = send(test_client, session, "7").json()
    assert body["message_to_player"].startswith("You can't get to room 7 from here.")
    assert body["location_update"] is None


def test_look_sends_structured_payload(test_client, session):
    body = send(test_client, session, "look").json()

    assert body["special_payload"]["type"] == "look_response"
    assert body["special_payload"]["exits"] == [2, 30]
    assert body["message_to_player"] == "Plain chamber number 1.\n\nPassages lead to rooms: 2, 30."


def test_unknown_command(test_client, session):
    body = send(test_client, session, "dance wildly").json()
    assert body["message_to_player"] == "I don't understand the command: 'dance wildly'. Type 'help' or '?'."
    assert body["game"] is None


def test_blank_command(test_client, session):
    body = send(test_client, session, "   ").json()
    assert body["message_to_player"] == "Please type a command."


def test_command_for_unknown_session(test_client):
    response = test_client.post(f"/api/v1/command/{uuid.uuid4()}", json={"command": "look"})
    assert response.status_code == 404


def test_finished_game_refuses_moves_but_allows_status(test_client, session):
    session.game_status = "lost"
    session.death_cause = "pit"

    refused = send(test_client, session, "2").json()
    status_body = send(test_client, session, "status").json()

    assert refused["message_to_player"] == "The game is over. Start a new game, or 'load' a saved one."
    assert refused["game_over"] is True
    assert "The game is over: you lost." in status_body["message_to_player"]


def test_inventory_and_use(test_client, session):
    assert send(test_client, session, "i").json()["message_to_player"] == "You are carrying nothing but your torch."

    add_item_to_inventory(session, "lantern")
    body = send(test_client, session, "use lantern").json()

    assert body["message_to_player"].startswith("You turn the lantern on.")
    assert body["game"]["inventory"][0]["is_active"] is True


def test_use_unknown_item(test_client, session):
    body = send(test_client, session, "use banana").json()
    assert body["message_to_player"] == "You don't have anything called 'banana'."


def test_inspect_item(test_client, session):
    add_item_to_inventory(session, "rusty_key")
    body = send(test_client, session, "x key").json()
    assert body["message_to_player"].startswith("Rusty Key: A giant, ancient looking rusty key")


def test_take_item(test_client, session):
    session.rooms[1].interactive_item = "cave_salt"
    body = send(test_client, session, "take").json()
    assert body["message_to_player"].startswith("You take the Cave Salt Crystal.")


def test_wait(test_client, session):
    body = send(test_client, session, "z").json()
    assert body["message_to_player"] == "Time passes. Somewhere in the darkness, water drips."


def test_trade_and_buy(test_client, session):
    session.current_position = 3
    add_item_to_inventory(session, "gold_coins")

    opened = send(test_client, session, "trade").json()
    bought = send(test_client, session, "buy 1").json()

    assert opened["game"]["shop_mode"] is True
    assert bought["game"]["shop_mode"] is False
    assert any(item["id"] == "wumpus_tshirt" for item in bought["game"]["inventory"])


def test_buy_outside_shop(test_client, session):
    body = send(test_client, session, "buy 1").json()
    assert body["message_to_player"].startswith("You're not browsing any wares.")


def test_help_lists_commands(test_client, session):
    body = send(test_client, session, "?").json()
    assert body["message_to_player"].startswith("--- Available Commands ---")
    assert "-- Trading --" in body["message_to_player"]


def test_save_then_load_restores_position(test_client, session):
    send(test_client, session, "save")
    session.current_position = 2

    body = send(test_client, session, "load").json()

    assert body["game"]["current_position"] == 1
    assert get_game(session.session_id) is not session
    assert body["message_to_player"] == "Game loaded! You're back in room 1. Welcome back, adventurer!"


def test_load_without_save(test_client, session):
    body = send(test_client, session, "load").json()
    assert body["message_to_player"] == "No saved game found."
