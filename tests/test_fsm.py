import pytest

from synce.fsm import FSM, FSMNode


def _recording_fsm():
    entered = []
    fsm = FSM()
    fsm.add_state("A", lambda: entered.append("A"))
    fsm.add_state("B", lambda: entered.append("B"))
    return fsm, entered


def test_first_state_becomes_current_and_is_entered():
    fsm, entered = _recording_fsm()
    assert fsm.current_state == "A"
    assert entered == ["A"]
    assert fsm.states == ("A", "B")


def test_true_condition_moves_to_target(capsys):
    fsm, entered = _recording_fsm()
    fsm.add_transition("A", "B", lambda: True)
    assert fsm.update() is True
    assert fsm.current_state == "B"
    assert entered == ["A", "B"]
    assert "FSM: A → B" in capsys.readouterr().out


def test_false_condition_keeps_state():
    fsm, entered = _recording_fsm()
    fsm.add_transition("A", "B", lambda: False)
    assert fsm.update() is False
    assert fsm.current_state == "A"
    assert entered == ["A"]


def test_transitions_from_other_states_are_ignored():
    fsm, _ = _recording_fsm()
    fsm.add_transition("B", "A", lambda: True)
    assert fsm.update() is False
    assert fsm.current_state == "A"


def test_only_first_matching_transition_per_update():
    fsm, _ = _recording_fsm()
    fsm.add_state("C", lambda: None)
    fsm.add_transition("A", "B", lambda: True)
    fsm.add_transition("B", "C", lambda: True)
    fsm.update()
    assert fsm.current_state == "B"
    fsm.update()
    assert fsm.current_state == "C"


def test_unknown_target_raises_key_error():
    fsm, _ = _recording_fsm()
    fsm.add_transition("A", "missing", lambda: True)
    with pytest.raises(KeyError):
        fsm.update()
    assert fsm.current_state == "A"


def test_fsm_node_transition_replaces_state_and_handler():
    seen = []
    node = FSMNode()
    node.transition(5, seen.append)
    assert node.state == 5
    node.handler("payload")
    assert seen == ["payload"]