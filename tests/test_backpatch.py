import pytest

from compilertoys.backpatch import (
    Quad,
    backpatch,
    format_quad_table,
    main,
    makelist,
    merge,
)


def test_makelist():
    assert makelist(3) == [3]


def test_merge_concatenates_in_order():
    assert merge([0, 5], [2]) == [0, 5, 2]


def test_merge_leaves_inputs_alone():
    first, second = [1], [2]
    merged = merge(first, second)
    merged.append(9)
    assert first == [1]
    assert second == [2]


def test_merge_with_empty():
    assert merge([], makelist(4)) == [4]


def test_backpatch_sets_targets_only():
    quads = [Quad("goto"), Quad("=", "1", "", "x"), Quad("goto")]
    backpatch(quads, merge(makelist(0), makelist(2)), 7)
    assert quads[0].result == "7"
    assert quads[2].result == "7"
    assert quads[1].result == "x"


def test_backpatch_out_of_range():
    with pytest.raises(IndexError):
        backpatch([Quad("goto")], [3], 1)


def test_format_header_and_row_count():
    quads = [Quad("goto", result="2"), Quad("=", "0", "", "x")]
    lines = format_quad_table(quads).splitlines()
    assert lines[0] == "No\tOp\tArg1\tArg2\tResult"
    assert len(lines) == len(quads) + 1
    assert lines[2] == "1\t=\t0\t\tx"


def test_main_prints_patched_table(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Quad Table after Backpatching:"
    assert lines[2] == "0\tif_false\ta<b\t\t3"
    assert lines[4] == "2\tgoto\t\t\t4"