"""Unit tests for the Cattery session: selection, mating and favorites."""

import random

import pytest
import requests
from unittest.mock import MagicMock

from cats.cat import Cat
from core.cattery import Cattery
from utils.favorites_api import FavoritesClient

CAT_A_DNA = "SAEGRHYOMCCREPUGDNDDIICTSJZQRYVQ"
CAT_B_DNA = "THWOMALWUJSLATWQMBCFTPOYHVDRESWL"
KITTEN_DNA = "STAHEWGORMHAYLOWMUCJCSRLEAPTUWGQ"


@pytest.fixture
def favorites_client():
    client = MagicMock(spec=FavoritesClient)
    client.fetch_favorites.return_value = []
    client.save_favorite.side_effect = lambda cat: cat.with_id(42)
    return client


@pytest.fixture
def cattery(favorites_client):
    """A cattery showing the two sample cats."""
    cattery = Cattery(favorites_client=favorites_client)
    cattery.originals = [Cat(CAT_A_DNA), Cat(CAT_B_DNA)]
    return cattery


def test_start_generates_originals_and_loads_favorites(favorites_client):
    saved = Cat(KITTEN_DNA, (CAT_A_DNA, CAT_B_DNA), 1)
    favorites_client.fetch_favorites.return_value = [saved]

    cattery = Cattery(favorites_client=favorites_client, rng=random.Random(7))
    cattery.start()

    assert len(cattery.originals) == 4
    assert all(not c.is_bred for c in cattery.originals)
    assert cattery.kittens == [saved]


def test_start_is_reproducible_with_seeded_rng():
    first = Cattery(rng=random.Random(1), original_count=3)
    second = Cattery(rng=random.Random(1), original_count=3)
    first.start()
    second.start()
    assert first.originals == second.originals
    assert len(first.originals) == 3


def test_start_survives_unreachable_favorites(favorites_client):
    favorites_client.fetch_favorites.side_effect = requests.ConnectionError("down")
    cattery = Cattery(favorites_client=favorites_client)
    cattery.start()
    assert len(cattery.originals) == 4
    assert cattery.kittens == []


def test_click_selects_then_deselects(cattery):
    assert cattery.click(CAT_A_DNA) is None
    assert cattery.selected_dna == CAT_A_DNA
    assert cattery.click(CAT_A_DNA) is None
    assert cattery.selected_dna is None
    assert cattery.kittens == []


def test_click_second_cat_mates_clicked_with_selected(cattery):
    cattery.click(CAT_B_DNA)
    kitten = cattery.click(CAT_A_DNA)

    # The clicked cat leads, the earlier selection is its mate
    assert kitten.dna == KITTEN_DNA
    assert kitten.parents == (CAT_A_DNA, CAT_B_DNA)
    assert cattery.kittens == [kitten]
    assert cattery.selected_dna is None


def test_click_kitten_can_mate_again(cattery):
    cattery.click(CAT_B_DNA)
    kitten = cattery.click(CAT_A_DNA)
    cattery.click(kitten.dna)
    grandkitten = cattery.click(CAT_A_DNA)
    assert grandkitten.parents == (CAT_A_DNA, kitten.dna)
    assert len(cattery.kittens) == 2


def test_click_unknown_cat(cattery):
    with pytest.raises(KeyError):
        cattery.click(KITTEN_DNA)


def test_toggle_favorite_saves_then_removes(cattery, favorites_client):
    cattery.click(CAT_B_DNA)
    cattery.click(CAT_A_DNA)

    saved = cattery.toggle_favorite(0)
    assert saved.id == 42
    assert cattery.kittens[0] is saved
    favorites_client.save_favorite.assert_called_once()

    unsaved = cattery.toggle_favorite(0)
    assert unsaved.id is None
    favorites_client.remove_favorite.assert_called_once_with(42)


def test_toggle_favorite_keeps_kitten_on_network_error(cattery, favorites_client):
    cattery.click(CAT_B_DNA)
    kitten = cattery.click(CAT_A_DNA)
    favorites_client.save_favorite.side_effect = requests.ConnectionError("down")

    assert cattery.toggle_favorite(0) is kitten
    assert cattery.kittens[0].id is None


def test_toggle_favorite_rejects_unbred_cat(cattery):
    cattery.kittens.append(Cat(CAT_A_DNA))
    with pytest.raises(ValueError, match="Only bred cats"):
        cattery.toggle_favorite(0)


def test_set_free_removes_saved_favorite(cattery, favorites_client):
    saved = Cat(KITTEN_DNA, (CAT_A_DNA, CAT_B_DNA), 5)
    cattery.kittens.append(saved)

    assert cattery.set_free(0) is saved
    assert cattery.kittens == []
    favorites_client.remove_favorite.assert_called_once_with(5)


def test_set_free_unsaved_kitten_skips_store(cattery, favorites_client):
    cattery.click(CAT_B_DNA)
    cattery.click(CAT_A_DNA)
    cattery.set_free(0)
    assert cattery.kittens == []
    favorites_client.remove_favorite.assert_not_called()


def test_set_free_still_frees_on_network_error(cattery, favorites_client):
    favorites_client.remove_favorite.side_effect = requests.ConnectionError("down")
    cattery.kittens.append(Cat(KITTEN_DNA, (CAT_A_DNA, CAT_B_DNA), 5))
    cattery.set_free(0)
    assert cattery.kittens == []

