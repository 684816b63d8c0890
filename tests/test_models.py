"""Tests for Permission and Mode formatting."""

from cchmod.perm import constants
from cchmod.perm.models import DiffOp, Mode, Permission


class TestPermissionFormatting:
    def test_as_num(self):
        assert Permission(read=True, write=True, execute=False).as_num() == "6"
        assert Permission().as_num() == "0"
        assert constants.RWX.as_num() == "7"

    def test_as_sym_omits_unset(self):
        assert Permission(read=True, write=False, execute=True).as_sym() == "rx"
        assert Permission().as_sym() == ""
        assert constants.W.as_sym() == "w"

    def test_as_sym_full_placeholders(self):
        assert Permission(read=True, write=False, execute=True).as_sym_full() == "r-x"
        assert Permission().as_sym_full() == "---"
        assert str(constants.WX) == "-wx"

    def test_numeric_range(self, all_permissions):
        digits = {p.as_num() for p in all_permissions}
        assert digits == set("01234567")

    def test_sym_full_alphabet_and_length(self, all_permissions):
        for p in all_permissions:
            full = p.as_sym_full()
            assert len(full) == 3
            assert set(full) <= set("rwx-")

    def test_sym_is_subsequence_of_rwx(self, all_permissions):
        for p in all_permissions:
            sym = p.as_sym()
            assert sym == "".join(c for c in p.as_sym_full() if c != "-")
            assert ("r" in sym) == p.read
            assert ("w" in sym) == p.write
            assert ("x" in sym) == p.execute


class TestModeFormatting:
    def test_as_num(self, mode_755):
        assert mode_755.as_num() == "755"

    def test_as_sym(self, mode_755, mode_644):
        assert mode_755.as_sym() == "rwxr-xr-x"
        assert mode_644.as_sym() == "rw-r--r--"
        assert str(mode_644) == "rw-r--r--"

    def test_default_is_empty(self):
        assert Mode().as_num() == "000"
        assert Mode().as_sym() == "---------"


class TestValueSemantics:
    def test_structural_equality(self):
        assert Permission(True, False, True) == constants.RX
        assert Mode(constants.RWX, constants.RX, constants.RX) == Mode.from_num("755")

    def test_hashable(self):
        assert len({Permission(True, True, True), constants.RWX}) == 1

    def test_digit_table_order(self):
        for digit, perm in enumerate(constants.BY_DIGIT):
            assert perm.as_num() == str(digit)


class TestDiffOp:
    def test_inverse(self):
        assert DiffOp.PLUS.inverse is DiffOp.MINUS
        assert DiffOp.MINUS.inverse is DiffOp.PLUS
        assert DiffOp.SAME.inverse is DiffOp.SAME

    def test_sort_order(self):
        ops = sorted([DiffOp.MINUS, DiffOp.SAME, DiffOp.PLUS], key=lambda op: op.sort_key)
        assert ops == [DiffOp.PLUS, DiffOp.SAME, DiffOp.MINUS]

    def test_builtin_ordering(self):
        assert sorted([DiffOp.MINUS, DiffOp.SAME, DiffOp.PLUS]) == [DiffOp.PLUS, DiffOp.SAME, DiffOp.MINUS]
        assert DiffOp.PLUS < DiffOp.SAME < DiffOp.MINUS
        assert DiffOp.MINUS >= DiffOp.SAME
        assert max([DiffOp.PLUS, DiffOp.MINUS, DiffOp.SAME]) is DiffOp.MINUS

    def test_symbols(self):
        assert DiffOp.PLUS.symbol == "+"
        assert DiffOp.MINUS.symbol == "-"
