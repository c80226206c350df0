from sleeper_adp.domain.errors import (
    AdpError,
    InputError,
    LeagueShape,
    NoDraftsFoundError,
    StructuralMismatchError,
    UpstreamError,
)


class TestErrorHierarchy:
    def test_all_errors_share_base(self) -> None:
        for error in (
            InputError("x"),
            UpstreamError("x"),
            NoDraftsFoundError(),
            StructuralMismatchError(LeagueShape("a", None, 12, 15), []),
        ):
            assert isinstance(error, AdpError)

    def test_upstream_error_carries_status(self) -> None:
        error = UpstreamError("Sleeper HTTP 500", status=500, url="https://example/x")
        assert error.status == 500
        assert error.url == "https://example/x"

    def test_no_drafts_message(self) -> None:
        error = NoDraftsFoundError(["L1", "L2"])
        assert str(error) == "no drafts found"
        assert error.league_ids == ["L1", "L2"]


class TestStructuralMismatchError:
    def test_message_names_reference_and_offenders(self) -> None:
        error = StructuralMismatchError(
            LeagueShape("L1", "Home League", 12, 15),
            [LeagueShape("L2", None, 10, 15)],
        )
        message = str(error)
        assert "L1 (Home League): teams=12, rounds=15" in message
        assert "L2: teams=10, rounds=15" in message
        assert error.expected_teams == 12
        assert error.expected_rounds == 15

    def test_lists_at_most_five_offenders(self) -> None:
        offenders = [LeagueShape(f"X{i}", None, 10, 15) for i in range(7)]
        error = StructuralMismatchError(LeagueShape("L1", None, 12, 15), offenders)
        message = str(error)
        assert "X4" in message
        assert "X5" not in message
        assert "and 2 more" in message
        assert len(error.offenders) == 7
