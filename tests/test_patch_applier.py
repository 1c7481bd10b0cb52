"""Tests for the patch applier."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from models.patch import InsertOperation, OutcomeStatus, ReplaceOperation
from services.patch_applier import PatchApplier, PatchState, apply_patch


class TestApplyScenarios:
    """The documented end-to-end examples."""

    def test_replace(self):
        assert apply_patch("a\nb\nc", "-b\n+B") == "a\nB\nc"

    def test_delete(self):
        assert apply_patch("a\nb\nc", "-b") == "a\nc"

    def test_insert_goes_to_top_without_prior_operations(self):
        assert apply_patch("a\nb\nc", "+z") == "z\na\nb\nc"

    def test_missing_replace_target_appends(self):
        assert apply_patch("a\nb\nc", "-x\n+y") == "a\nb\nc\ny"

    def test_crlf_preserved(self):
        assert apply_patch("a\r\nb", "-a\n+A") == "A\r\nb"


class TestLineEndings:
    @pytest.mark.parametrize("text", ["a\nb\nc", "a\nb\n", "", "single", "\n\n"])
    def test_empty_diff_is_noop(self, text):
        assert apply_patch(text, "") == text

    def test_empty_diff_normalizes_mixed_endings(self):
        assert apply_patch("a\r\nb\nc", "") == "a\r\nb\r\nc"

    def test_lf_input_never_gets_crlf(self):
        result = apply_patch("a\nb\nc", "-b\r\n+B\r\n+new\r\n")
        assert "\r\n" not in result
        assert result == "a\nB\nnew\nc"

    def test_crlf_input_has_no_bare_lf(self):
        result = apply_patch("a\r\nb\r\nc", "-b\n+B\n+new")
        assert result == "a\r\nB\r\nnew\r\nc"
        assert "\n" not in result.replace("\r\n", "")

    def test_trailing_newline_kept(self):
        assert apply_patch("a\nb\n", "-b\n+B") == "a\nB\n"


class TestCursor:
    def test_repeated_deletes_run_top_to_bottom(self):
        assert apply_patch("x\ny\nx", "-x\n-x") == "y"

    def test_repeated_replaces_run_top_to_bottom(self):
        assert apply_patch("x\ny\nx", "-x\n+A\n-x\n+B") == "A\ny\nB"

    def test_insert_follows_replace(self):
        assert apply_patch("a\nb\nc", "-a\n+A\n+new") == "A\nnew\nb\nc"

    def test_insert_follows_delete(self):
        assert apply_patch("a\nb\nc", "-b\n\n+x") == "a\nx\nc"

    def test_insert_after_append_fallback(self):
        assert apply_patch("a\nb", "-z\n+y\n+w") == "a\nb\ny\nw"

    def test_wrap_around_matches_line_before_cursor(self):
        # Known quirk: after editing "c", the search for "a" misses from the
        # cursor and wraps around to the top instead of failing.
        assert apply_patch("a\nb\nc", "-c\n+C\n-a\n+A") == "A\nb\nC"

    def test_wrap_around_edits_line_above_the_last_edit(self):
        # Known quirk: the replace writes a duplicate "b" below the original
        # one, and the next search for "b" wraps around to the line above it.
        assert apply_patch("b\na", "-a\n+b\n-b\n+c") == "c\nb"


class TestMatching:
    def test_exact_whole_line_only(self):
        assert apply_patch("  a\nb", "-a\n+A") == "  a\nb\nA"

    def test_missing_delete_target_is_noop(self):
        assert apply_patch("a\nb", "-z") == "a\nb"

    def test_unique_replace_changes_only_that_line(self):
        original = ["one", "two", "three", "four"]
        result = apply_patch("\n".join(original), "-three\n+3").split("\n")
        assert result == ["one", "two", "3", "four"]

    def test_delete_reduces_line_count_by_one(self):
        original = "k\nx\nk\nx"
        result = apply_patch(original, "-x")
        assert len(result.split("\n")) == len(original.split("\n")) - 1

    def test_empty_original(self):
        assert apply_patch("", "+z") == "z\n"
        assert apply_patch("", "-x\n+y") == "\ny"

    def test_noise_only_diff(self):
        assert apply_patch("a\nb", "@@ header @@\n context only") == "a\nb"


class TestApplyReport:
    def test_outcomes(self):
        result = PatchApplier().apply_with_report("a\nb\nc", "-b\n+B\n-zz\n+q\n-gone\n+top")
        assert result.patched == "a\nB\nc\nq\ntop"
        assert result.line_ending == "lf"
        assert [o.status for o in result.outcomes] == [
            OutcomeStatus.REPLACED,
            OutcomeStatus.APPENDED,
            OutcomeStatus.APPENDED,
        ]
        assert [o.line for o in result.outcomes] == [1, 3, 4]

    def test_skipped_delete_and_insert(self):
        result = PatchApplier().apply_with_report("a\r\nb", "-zz\n+new")
        assert result.line_ending == "crlf"
        assert len(result.operations) == 1
        assert result.outcomes[0].status == OutcomeStatus.APPENDED

        result = PatchApplier().apply_with_report("a\nb", "-zz\n\n+new")
        assert [o.status for o in result.outcomes] == [OutcomeStatus.SKIPPED, OutcomeStatus.INSERTED]
        assert result.outcomes[0].line is None
        assert result.outcomes[1].line == 0
        assert result.patched == "new\na\nb"

    def test_apply_matches_report(self):
        applier = PatchApplier()
        assert applier.apply("a\nb", "-a") == applier.apply_with_report("a\nb", "-a").patched


class TestPatchState:
    def test_cursor_stays_in_bounds(self):
        state = PatchState(lines=["a"], cursor=5)
        state.apply(0, InsertOperation(new="z"))
        assert state.lines == ["a", "z"]
        assert state.cursor == 2

    def test_find_prefers_cursor(self):
        state = PatchState(lines=["x", "y", "x"], cursor=1)
        assert state.find("x") == 2
        assert state.find("y") == 1
        assert state.find("missing") == -1

    def test_replace_miss_moves_cursor_to_end(self):
        state = PatchState(lines=["a", "b"])
        state.apply(0, ReplaceOperation(old="zz", new="q"))
        assert state.lines == ["a", "b", "q"]
        assert state.cursor == 3


def test_concurrent_applies_are_independent():
    jobs = [(f"line{i}\nshared\nend", f"-line{i}\n+LINE{i}") for i in range(32)]
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda job: apply_patch(*job), jobs))
    assert results == [f"LINE{i}\nshared\nend" for i in range(32)]
