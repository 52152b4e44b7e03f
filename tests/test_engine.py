import random
import pytest

from pokebattle.battle.core import BattleEngine
from pokebattle.battle.models import Move, Creature
from pokebattle.battle.roster import Roster
from pokebattle.battle.events import MatchState
from pokebattle.battle.ai import strongest_move
from pokebattle.battle.mechanics import ACCURACY_FIXED, SUPER_EFFECTIVE
from pokebattle.core.errors import (
    InvalidEncounterError, NoAvailableCombatantsError, EncounterStalledError,
)


def duel_pair():
    pikachu = Creature("Pikachu", "Electric", 100, [
        Move("Thunderbolt", "Electric", 90, 100, "special"),
        Move("Iron Tail", "Steel", 100, 75),
    ])
    blastoise = Creature("Blastoise", "Water", 110, [
        Move("Hydro Pump", "Water", 100, 80, "special"),
        Move("Surf", "Water", 90, 100, "special"),
    ])
    return pikachu, blastoise


def test_encounter_rejects_missing_or_fainted(make_creature):
    engine = BattleEngine(random.Random(1))
    a, b = make_creature(name="a"), make_creature(name="b")
    with pytest.raises(InvalidEncounterError):
        engine.resolve_encounter(None, b)
    with pytest.raises(InvalidEncounterError):
        engine.resolve_encounter(a, a)
    b.take_damage(999)
    with pytest.raises(InvalidEncounterError):
        engine.resolve_encounter(a, b)
    assert a.current_health == a.max_health


@pytest.mark.parametrize("seed", range(20))
def test_encounter_ends_with_exactly_one_fainted(seed):
    a, b = duel_pair()
    result = BattleEngine(random.Random(seed)).resolve_encounter(a, b)
    assert [a.current_health, b.current_health].count(0) == 1
    assert result.winner.is_alive()
    assert not result.loser.is_alive()
    assert {result.winner, result.loser} == {a, b}
    assert result.rounds >= 1
    assert result.actions[-1].fainted


def test_encounter_is_reproducible_with_seed():
    traces = []
    for _ in range(2):
        a, b = duel_pair()
        result = BattleEngine(random.Random(2024)).resolve_encounter(a, b)
        traces.append((result.actions, result.winner_name, result.rounds))
    assert traces[0] == traces[1]


def test_first_argument_acts_first(make_creature, scripted_rng):
    a = make_creature(name="a", hp=10)
    b = make_creature(name="b", hp=10)
    result = BattleEngine(scripted_rng()).resolve_encounter(a, b)
    assert result.winner is a
    assert len(result.actions) == 1
    assert result.actions[0].actor == "a"
    assert b.current_health == 0
    assert a.current_health == 10


def test_second_combatant_answers_in_same_round(make_creature, scripted_rng):
    a = make_creature(name="a", hp=50)
    b = make_creature(name="b", hp=100)
    result = BattleEngine(scripted_rng()).resolve_encounter(a, b)
    # b takes 40 per hit, a takes 40 per hit; a faints on b's second action
    assert [r.actor for r in result.actions] == ["a", "b", "a", "b"]
    assert result.winner is b
    assert result.rounds == 2
    assert b.current_health == 20


def test_miss_leaves_health_untouched(make_creature, scripted_rng):
    a = make_creature(name="a")
    b = make_creature(name="b", hp=50)
    engine = BattleEngine(scripted_rng(draws=[0.95]), accuracy_mode=ACCURACY_FIXED)
    record = engine.execute_action(a, b)
    assert record.hit is False
    assert record.damage == 0
    assert record.target_health == 50
    assert b.current_health == 50


def test_action_record_and_commentary(scripted_rng):
    lines = []
    squirtle = Creature("Squirtle", "Water", 44, [Move("Water Gun", "Water", 40)])
    charmander = Creature("Charmander", "Fire", 39, [Move("Scratch", "Normal", 40)])
    engine = BattleEngine(scripted_rng(), message_cb=lines.append)
    record = engine.execute_action(squirtle, charmander)
    assert record.hit
    assert record.damage == 60
    assert record.multiplier == 1.5
    assert record.effectiveness == SUPER_EFFECTIVE
    assert record.fainted
    assert lines == [
        "Squirtle uses Water Gun!",
        "Charmander takes 60 damage!",
        "It's super effective!",
        "Charmander fainted!",
    ]


def test_move_policy_is_pluggable(scripted_rng):
    mon = Creature("Lotad", "Grass", 60, [Move("Tackle", "Normal", 40), Move("Razor Leaf", "Grass", 55)])
    foe = Creature("Piplup", "Water", 200, [Move("Pound", "Normal", 40)])
    record = BattleEngine(scripted_rng(pick=0), move_policy=strongest_move).execute_action(mon, foe)
    assert record.move == "Razor Leaf"
    record = BattleEngine(scripted_rng(pick=0)).execute_action(mon, foe)
    assert record.move == "Tackle"


def test_powerless_encounter_stalls_when_capped(make_creature, rng):
    splash = [Move("Splash", "Water", 0)]
    a = make_creature(name="a", moves=splash)
    b = make_creature(name="b", moves=splash)
    with pytest.raises(EncounterStalledError) as exc:
        BattleEngine(rng, max_rounds=5).resolve_encounter(a, b)
    assert exc.value.rounds == 5


def test_invalid_accuracy_mode():
    with pytest.raises(ValueError):
        BattleEngine(accuracy_mode="always")


def test_one_hp_match_takes_one_encounter(make_creature, scripted_rng):
    x = make_creature(name="X", hp=1)
    y = make_creature(name="Y", hp=1)
    red, blue = Roster("Red", [x]), Roster("Blue", [y])
    engine = BattleEngine(scripted_rng())
    result = engine.resolve_match(red, blue)
    assert len(result.encounters) == 1
    assert result.winner is red
    assert result.loser is blue
    assert (red.wins, red.badges, red.losses) == (1, 1, 0)
    assert (blue.wins, blue.badges, blue.losses) == (0, 0, 1)
    assert engine.state is MatchState.MATCH_COMPLETE


def test_match_chains_encounters(make_creature, scripted_rng):
    weak = make_creature(name="a1", hp=1, moves=[Move("Nudge", "Normal", 1)])
    strong = make_creature(name="a2", hp=100)
    foe = make_creature(name="b1", hp=30)
    red, blue = Roster("Red", [weak, strong]), Roster("Blue", [foe])
    engine = BattleEngine(scripted_rng())
    result = engine.resolve_match(red, blue)
    assert [e.winner_name for e in result.encounters] == ["b1", "a2"]
    assert result.winner_name == "Red"
    assert engine.state_log == [
        MatchState.AWAITING_PAIR, MatchState.IN_ENCOUNTER,
        MatchState.AWAITING_PAIR, MatchState.IN_ENCOUNTER,
        MatchState.AWAITING_PAIR, MatchState.MATCH_COMPLETE,
    ]


@pytest.mark.parametrize("seed", [1, 7, 42])
def test_seeded_match_exhausts_loser(seed):
    pikachu, blastoise = duel_pair()
    charizard = Creature("Charizard", "Fire/Flying", 120, [
        Move("Flamethrower", "Fire", 90, 100, "special"),
        Move("Dragon Claw", "Dragon", 80),
    ])
    ash, gary = Roster("Ash", [pikachu, charizard]), Roster("Gary", [blastoise])
    result = BattleEngine(random.Random(seed)).resolve_match(ash, gary)
    assert result.winner.has_available()
    assert not result.loser.has_available()
    assert result.winner.wins == 1 and result.loser.losses == 1
    assert ash.wins + gary.wins == 1


def test_match_rejects_exhausted_roster(make_creature):
    fainted = make_creature(name="f")
    fainted.take_damage(999)
    ready = Roster("Ready", [make_creature()])
    for empty in (Roster("Empty"), Roster("Fainted", [fainted])):
        engine = BattleEngine(random.Random(3))
        with pytest.raises(NoAvailableCombatantsError) as exc:
            engine.resolve_match(ready, empty)
        assert exc.value.roster == empty.name
        assert engine.state is None
        assert (ready.wins, ready.losses, empty.wins, empty.losses) == (0, 0, 0, 0)


def test_match_rejects_same_roster_twice(make_creature):
    r = Roster("Solo", [make_creature(name="a"), make_creature(name="b")])
    with pytest.raises(InvalidEncounterError):
        BattleEngine().resolve_match(r, r)
    with pytest.raises(NoAvailableCombatantsError):
        BattleEngine().resolve_match(r, None)
