from types import SimpleNamespace

import pytest

from pyintcode.utils.trace import TraceRecorder


def test_trace_recorder_overwrites_old_entries():
    recorder = TraceRecorder(capacity=2)

    state = SimpleNamespace(ip=0, relative_base=0, halted=False)
    recorder.record_step(state, 1101, (1, 2, 3), 5, mnemonic="ADD")
    state2 = SimpleNamespace(ip=4, relative_base=0, halted=False)
    recorder.record_step(state2, 109, (5,), 6, mnemonic="ARB")
    state3 = SimpleNamespace(ip=6, relative_base=19, halted=False)
    recorder.record_step(state3, 204, (19,), 61, mnemonic="OUT", note="grown")

    lines = list(recorder.format_entries())
    assert len(lines) == 2
    assert len(recorder) == 2
    assert "ip=000004" in lines[0]
    assert "ip=000006" in lines[1]
    assert "rb=19" in lines[1]
    assert "len=61" in lines[1]
    assert "flags=grown" in lines[1]


def test_trace_recorder_formats_halt():
    recorder = TraceRecorder(1)
    state = SimpleNamespace(ip=8, relative_base=0, halted=True)
    recorder.record_step(state, None, (), 9, note="stopped")

    lines = list(recorder.format_entries())
    assert len(lines) == 1
    assert "word=    --" in lines[0]
    assert "operands=-" in lines[0]
    assert "flags=HALT,stopped" in lines[0]


def test_trace_recorder_limit_and_last_entry():
    recorder = TraceRecorder(4)
    assert recorder.last_entry() is None

    for ip in range(3):
        recorder.record_step(SimpleNamespace(ip=ip, relative_base=0, halted=False), 0, (), 3, mnemonic="NOP")

    assert [entry.ip for entry in recorder.entries(limit=2)] == [1, 2]
    assert recorder.last_entry().ip == 2


def test_trace_recorder_rejects_zero_capacity():
    with pytest.raises(ValueError):
        TraceRecorder(0)
