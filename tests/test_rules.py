"""Unit tests for legal move generation and state transitions."""

import random
from typing import Sequence

import pytest
from unosim.engine import (
    Card,
    CardVariant,
    Color,
    DeckExhaustedError,
    GameState,
    Move,
    MoveVariant,
    apply_move,
    get_legal_moves,
    init_game,
    playable,
)

R, B, G, Y, W = Color.RED, Color.BLUE, Color.GREEN, Color.YELLOW, Color.WILD


def v(value: int, color: Color) -> Card:
    return Card(value, color, CardVariant.VALUE)


def special(variant: CardVariant, color: Color = W) -> Card:
    return Card(0, color, variant)


def make_state(
    hands: Sequence[Sequence[Card]],
    field: Sequence[Card],
    deck: Sequence[Card] = (),
    turn: int = 0,
    direction: bool = False,
    chainable: bool = False,
    accum: int = 0,
    seed: int = 100,
) -> GameState:
    if not deck:
        deck = [v(n, G) for n in range(1, 10)]
    return GameState(
        deck=tuple(deck),
        field=tuple(field),
        hands=tuple(tuple(h) for h in hands),
        players=len(hands),
        turn=turn,
        direction=direction,
        seed=seed,
        chainable=chainable,
        accum=accum,
    )


# --- playable ---------------------------------------------------------------


def test_value_matches_color() -> None:
    move = playable(v(5, R), v(3, R), 2, 1, False)
    assert move == Move(2, 1, MoveVariant.PLAY, R)


def test_value_matches_number_across_colors() -> None:
    move = playable(v(5, R), v(5, B), 0, 0, False)
    assert move == Move(0, 0, MoveVariant.PLAY, B)


def test_value_mismatch_is_not_playable() -> None:
    assert playable(v(5, R), v(3, B), 0, 0, False) is None


def test_value_zero_does_not_match_action_card_of_other_color() -> None:
    # Action cards store value 0, but number matching needs both to be VALUE cards.
    assert playable(special(CardVariant.CANCEL, R), v(0, B), 0, 0, False) is None


def test_action_cards_need_matching_color() -> None:
    top = special(CardVariant.CANCEL, R)
    assert playable(top, special(CardVariant.CANCEL, B), 0, 0, False) is None
    assert playable(top, special(CardVariant.CANCEL, R), 0, 0, False).variant is MoveVariant.SKIP
    assert playable(top, special(CardVariant.REVERSE, R), 0, 0, False).variant is MoveVariant.REVERSE
    assert playable(top, special(CardVariant.DRAW_TWO, R), 0, 0, False).variant is MoveVariant.DRAW_TWO


def test_wild_cards_always_playable() -> None:
    top = v(8, Y)
    assert playable(top, special(CardVariant.WILD), 0, 0, False) == Move(0, 0, MoveVariant.PLAY, W)
    assert playable(top, special(CardVariant.DRAW_FOUR), 0, 0, False).variant is MoveVariant.DRAW_FOUR


def test_chain_blocks_other_variants() -> None:
    top = special(CardVariant.DRAW_TWO, R)
    assert playable(top, v(4, R), 0, 0, True) is None
    assert playable(top, special(CardVariant.DRAW_FOUR), 0, 0, True) is None
    assert playable(top, special(CardVariant.DRAW_TWO, R), 0, 0, True) is not None


def test_chain_only_restricts_when_top_is_a_draw_card() -> None:
    assert playable(v(5, R), special(CardVariant.CANCEL, R), 0, 0, True) is not None


# --- get_legal_moves ---------------------------------------------------------


def test_wild_expands_to_four_colors() -> None:
    state = make_state([[special(CardVariant.WILD)], [v(1, R)]], [v(5, R)])
    moves = get_legal_moves(state)
    assert [m.as_color for m in moves] == [R, Y, B, G]
    assert all(m.variant is MoveVariant.PLAY and m.hand_idx == 0 for m in moves)


def test_legal_moves_never_declare_wild() -> None:
    for seed in range(20):
        state = init_game(3, 1, 7, seed=seed)
        for move in get_legal_moves(state):
            if move.variant is not MoveVariant.DRAW_DECK:
                assert move.as_color is not Color.WILD


def test_moves_follow_hand_order() -> None:
    hand = [v(3, R), v(4, B), special(CardVariant.DRAW_FOUR), special(CardVariant.REVERSE, R)]
    state = make_state([hand, [v(1, R)]], [v(5, R)])
    moves = get_legal_moves(state)
    assert [m.hand_idx for m in moves] == [0, 2, 2, 2, 2, 3]
    assert [m.variant for m in moves] == [
        MoveVariant.PLAY,
        MoveVariant.DRAW_FOUR,
        MoveVariant.DRAW_FOUR,
        MoveVariant.DRAW_FOUR,
        MoveVariant.DRAW_FOUR,
        MoveVariant.REVERSE,
    ]


def test_forced_draw_when_nothing_playable() -> None:
    state = make_state([[v(3, B), v(4, G)], [v(1, R)]], [v(5, R)])
    assert get_legal_moves(state) == [Move(0, 0, MoveVariant.DRAW_DECK, W)]


def test_empty_hand_has_no_moves() -> None:
    state = make_state([[], [v(1, R)]], [v(5, R)])
    assert get_legal_moves(state) == []


def test_chain_restriction_on_draw_two() -> None:
    hand = [v(5, R), special(CardVariant.DRAW_TWO, R), special(CardVariant.DRAW_TWO, B),
            special(CardVariant.DRAW_FOUR), special(CardVariant.WILD)]
    state = make_state([[v(1, G)], hand], [special(CardVariant.DRAW_TWO, R)],
                       turn=1, chainable=True, accum=2)
    assert get_legal_moves(state) == [Move(1, 1, MoveVariant.DRAW_TWO, R)]


def test_chain_restriction_on_draw_four() -> None:
    hand = [special(CardVariant.DRAW_TWO, R), special(CardVariant.DRAW_FOUR)]
    state = make_state([hand, [v(1, G)]], [special(CardVariant.DRAW_FOUR, R)],
                       chainable=True, accum=4)
    moves = get_legal_moves(state)
    assert len(moves) == 4
    assert all(m.variant is MoveVariant.DRAW_FOUR and m.hand_idx == 1 for m in moves)


def test_chain_without_matching_card_forces_draw() -> None:
    state = make_state([[v(5, R), special(CardVariant.DRAW_FOUR)], [v(1, G)]],
                       [special(CardVariant.DRAW_TWO, R)], chainable=True, accum=2)
    assert get_legal_moves(state) == [Move(0, 0, MoveVariant.DRAW_DECK, W)]


def test_get_legal_moves_does_not_mutate() -> None:
    state = init_game(2, 1, 7, seed=3)
    snapshot = GameState(**vars(state))
    get_legal_moves(state)
    assert state == snapshot


# --- apply_move ----------------------------------------------------------------


def test_turn_wraps_around() -> None:
    state = make_state([[v(1, R)], [v(2, R)], [v(3, R), v(4, R)]], [v(5, R)], turn=2)
    nxt = apply_move(state, get_legal_moves(state)[0])
    assert nxt.turn == 0


def test_descending_turn_wraps_below_zero() -> None:
    state = make_state([[v(1, R), v(2, R)], [v(2, R)], [v(3, R)]], [v(5, R)], direction=True)
    nxt = apply_move(state, get_legal_moves(state)[0])
    assert nxt.turn == 2


def test_skip_advances_two() -> None:
    hands = [[special(CardVariant.CANCEL, R), v(1, R)], [v(2, R)], [v(3, R)]]
    state = make_state(hands, [v(5, R)])
    nxt = apply_move(state, get_legal_moves(state)[0])
    assert nxt.turn == 2


def test_skip_with_two_players_returns_to_player() -> None:
    state = make_state([[special(CardVariant.CANCEL, R), v(1, R)], [v(2, R)]], [v(5, R)])
    nxt = apply_move(state, get_legal_moves(state)[0])
    assert nxt.turn == 0


def test_reverse_toggles_direction() -> None:
    hands = [[v(1, R)], [special(CardVariant.REVERSE, R), v(1, B)], [v(3, R)]]
    state = make_state(hands, [v(5, R)], turn=1)
    nxt = apply_move(state, get_legal_moves(state)[0])
    assert nxt.direction is True
    assert nxt.turn == 0

    hands = [[v(1, R)], [v(1, B)], [special(CardVariant.REVERSE, R), v(3, R)]]
    state = make_state(hands, [v(5, R)], turn=2, direction=True)
    nxt = apply_move(state, get_legal_moves(state)[0])
    assert nxt.direction is False
    assert nxt.turn == 0


def test_play_moves_card_to_field() -> None:
    state = make_state([[v(1, B), v(3, R)], [v(2, R)]], [v(5, R)])
    move = get_legal_moves(state)[0]
    nxt = apply_move(state, move)
    assert nxt.hands[0] == (v(1, B),)
    assert nxt.field == (v(5, R), v(3, R))
    assert nxt.deck == state.deck
    assert nxt.chainable is False and nxt.accum == 0


def test_wild_takes_declared_color() -> None:
    state = make_state([[special(CardVariant.WILD), v(1, B)], [v(2, R)]], [v(5, R)])
    move = next(m for m in get_legal_moves(state) if m.as_color is G)
    nxt = apply_move(state, move)
    assert nxt.top_of_field() == Card(0, G, CardVariant.WILD)
    assert get_legal_moves(nxt) == [Move(0, 1, MoveVariant.DRAW_DECK, W)]


def test_plain_draw_takes_one_card() -> None:
    state = make_state([[v(1, B)], [v(2, R)]], [v(5, R)])
    nxt = apply_move(state, get_legal_moves(state)[0])
    assert nxt.hands[0] == (v(1, B), state.deck[-1])
    assert nxt.deck == state.deck[:-1]
    assert nxt.turn == 1


def test_draw_chain_scenario() -> None:
    deck = [v(n, G) for n in range(1, 8)]
    hands = [[special(CardVariant.DRAW_TWO, R), v(1, B)], [special(CardVariant.DRAW_TWO, R), v(2, B)]]
    state = make_state(hands, [v(5, R)], deck=deck)

    state = apply_move(state, Move(0, 0, MoveVariant.DRAW_TWO, R))
    assert (state.accum, state.chainable, state.turn) == (2, True, 1)

    moves = get_legal_moves(state)
    assert moves == [Move(0, 1, MoveVariant.DRAW_TWO, R)]
    state = apply_move(state, moves[0])
    assert (state.accum, state.chainable, state.turn) == (4, True, 0)

    moves = get_legal_moves(state)
    assert moves == [Move(0, 0, MoveVariant.DRAW_DECK, W)]
    state = apply_move(state, moves[0])
    assert (state.accum, state.chainable, state.turn) == (0, False, 1)
    assert len(state.hands[0]) == 5
    assert state.hands[0][1:] == tuple(reversed(deck[-4:]))
    assert len(state.deck) == 3


def test_draw_four_adds_four() -> None:
    state = make_state([[special(CardVariant.DRAW_FOUR), v(1, B)], [v(2, R)]], [v(5, R)], accum=2)
    move = next(m for m in get_legal_moves(state) if m.as_color is B)
    nxt = apply_move(state, move)
    assert nxt.accum == 6
    assert nxt.chainable is True
    assert nxt.top_of_field() == Card(0, B, CardVariant.DRAW_FOUR)


def test_skip_and_reverse_leave_chain_untouched() -> None:
    state = make_state([[special(CardVariant.CANCEL, R), v(1, B)], [v(2, R)]], [v(5, R)],
                       chainable=True, accum=2)
    nxt = apply_move(state, get_legal_moves(state)[0])
    assert nxt.chainable is True
    assert nxt.accum == 2


def test_reshuffle_when_deck_empties() -> None:
    field = [v(1, B), v(2, B), v(4, Y), v(3, R)]
    state = make_state([[v(7, Y)], [v(2, R)]], field, deck=[v(9, G)], seed=55)
    nxt = apply_move(state, get_legal_moves(state)[0])

    assert nxt.hands[0] == (v(7, Y), v(9, G))
    assert nxt.field == (v(3, R),)
    assert sorted(map(str, nxt.deck)) == sorted(map(str, field[:-1]))
    assert nxt.seed == 56

    expected = list(field[:-1])
    random.Random(55).shuffle(expected)
    assert nxt.deck == tuple(expected)


def test_reshuffle_with_single_field_card_leaves_empty_deck() -> None:
    state = make_state([[v(7, Y)], [v(2, R)]], [v(3, R)], deck=[v(9, G)], seed=5)
    nxt = apply_move(state, get_legal_moves(state)[0])
    assert nxt.deck == ()
    assert nxt.field == (v(3, R),)
    assert nxt.seed == 6


def test_penalty_draw_reshuffles_when_deck_runs_dry() -> None:
    field = [v(1, B), v(2, B), v(3, B), special(CardVariant.DRAW_TWO, R)]
    state = make_state([[v(7, Y)], [v(2, R)]], field, deck=[v(9, G)],
                       chainable=True, accum=2, seed=10)
    nxt = apply_move(state, get_legal_moves(state)[0])
    assert len(nxt.hands[0]) == 3
    assert nxt.field == (special(CardVariant.DRAW_TWO, R),)
    assert len(nxt.deck) == 2
    assert nxt.seed == 11
    assert nxt.total_cards() == state.total_cards()


def test_penalty_draw_with_no_cards_left_raises() -> None:
    state = make_state([[v(7, Y)], [v(2, R)]], [special(CardVariant.DRAW_TWO, R)],
                       deck=[v(9, G)], chainable=True, accum=2)
    with pytest.raises(DeckExhaustedError):
        apply_move(state, get_legal_moves(state)[0])


def test_apply_move_leaves_input_untouched() -> None:
    state = init_game(3, 1, 7, seed=21)
    snapshot = GameState(**vars(state))
    for move in get_legal_moves(state):
        nxt = apply_move(state, move)
        assert nxt is not state
    assert state == snapshot


# --- properties over whole games --------------------------------------------------


@pytest.mark.parametrize("seed", range(8))
def test_random_playouts_conserve_cards(seed: int) -> None:
    players = 2 + seed % 3
    state = init_game(players, 1, 7, seed=seed)
    total = state.total_cards()
    rng = random.Random(seed)

    for _ in range(400):
        if state.winner is not None:
            assert state.hands[state.winner] == ()
            break
        moves = get_legal_moves(state)
        assert moves
        if state.chainable and state.top_of_field().variant in (CardVariant.DRAW_TWO, CardVariant.DRAW_FOUR):
            top_variant = state.top_of_field().variant
            hand = state.hands[state.turn]
            if moves[0].variant is MoveVariant.DRAW_DECK:
                assert len(moves) == 1
            else:
                assert all(hand[m.hand_idx].variant is top_variant for m in moves)
        move = rng.choice(moves)
        try:
            state = apply_move(state, move)
        except DeckExhaustedError:
            break
        assert state.total_cards() == total
        assert state.field
        assert 0 <= state.turn < players


def test_replay_from_same_seed_is_identical() -> None:
    def play(seed: int) -> GameState:
        state = init_game(3, 1, 7, seed=seed)
        for _ in range(150):
            if state.winner is not None:
                break
            moves = get_legal_moves(state)
            state = apply_move(state, moves[-1])
        return state

    assert play(12) == play(12)
