"""Tests for the party table."""

import pytest

from policy_space.errors import ValidationError
from policy_space.models import Party
from policy_space.repositories import DEFAULT_PARTIES, PartyTable


class TestDefault:
    def test_six_parties(self, table):
        assert len(table) == 6
        assert table.ids == [row[0] for row in DEFAULT_PARTIES]

    def test_seats_and_threshold(self, table):
        assert table.total_seats == 101
        assert table.majority_threshold == 51
        assert [p.seats for p in table] == [27, 15, 7, 8, 30, 14]

    def test_radii_not_set(self, table):
        assert all(p.radius is None for p in table)


class TestRows:
    def test_tuples_dicts_and_parties(self):
        table = PartyTable(
            [
                ("A", -1, 2, 10),
                {"id": "B", "lr": 0.5, "conlib": -3, "seats": 20},
                Party("C", 4.0, 4.0, 5),
            ]
        )
        assert table.ids == ["A", "B", "C"]
        assert table.get("B").lr == 0.5
        assert table.get("A").lr == -1.0

    def test_bounds_inclusive(self):
        table = PartyTable([("A", -10, 10, 1), ("B", 10, -10, 1)])
        assert table.get("A").lr == -10.0

    def test_legislature_size_matches(self):
        assert PartyTable([("A", 0, 0, 60), ("B", 1, 1, 40)], legislature_size=100).total_seats == 100


class TestValidation:
    @pytest.mark.parametrize(
        "row, field",
        [
            (("A", 10.5, 0, 10), "lr"),
            (("A", 0, -11, 10), "conlib"),
            (("A", 0, 0, -1), "seats"),
            (("", 0, 0, 10), "id"),
        ],
    )
    def test_bad_row(self, row, field):
        with pytest.raises(ValidationError) as exc:
            PartyTable([row])
        assert exc.value.field == field

    def test_missing_field(self):
        with pytest.raises(ValidationError) as exc:
            PartyTable([{"id": "A", "lr": 0, "conlib": 0}])
        assert exc.value.field == "seats"

    def test_empty(self):
        with pytest.raises(ValidationError) as exc:
            PartyTable([])
        assert exc.value.field == "parties"

    def test_duplicate_id(self):
        with pytest.raises(ValidationError) as exc:
            PartyTable([("A", 0, 0, 1), ("A", 1, 1, 1)])
        assert exc.value.field == "id"

    def test_no_seats(self):
        with pytest.raises(ValidationError) as exc:
            PartyTable([("A", 0, 0, 0), ("B", 1, 1, 0)])
        assert exc.value.field == "seats"

    @pytest.mark.parametrize("pid", ["A+B", "+", "none"])
    def test_id_cannot_clash_with_labels(self, pid):
        with pytest.raises(ValidationError) as exc:
            PartyTable([("A", 0, 0, 5), ("B", 0, 0, 5), (pid, 3, 0, 10)])
        assert exc.value.field == "id"

    def test_similar_ids_allowed(self):
        assert PartyTable([("A-B", 0, 0, 5), ("None", 1, 1, 5)]).ids == ["A-B", "None"]

    def test_legislature_size_mismatch(self):
        with pytest.raises(ValidationError) as exc:
            PartyTable([("A", 0, 0, 60), ("B", 1, 1, 40)], legislature_size=101)
        assert exc.value.field == "legislature_size"


class TestAccess:
    def test_index_and_contains(self, table):
        assert table.index("SDP") == 0
        assert table.index("NAT") == 5
        assert "CON" in table
        assert "XYZ" not in table

    def test_unknown(self, table):
        with pytest.raises(KeyError):
            table.get("XYZ")

    def test_to_frame(self, table):
        df = table.to_frame()
        assert df.columns == ["id", "lr", "conlib", "seats"]
        assert df.height == 6
        assert df["seats"].sum() == 101


class TestCsv:
    def test_load(self, tmp_path):
        path = tmp_path / "parties.csv"
        path.write_text("id,lr,conlib,seats,name\nA,-2.5,1,40,Alpha\nB,3,-4,61,Beta\n")

        table = PartyTable.from_csv(path)
        assert table.ids == ["A", "B"]
        assert table.get("A").lr == -2.5
        assert table.total_seats == 101

    def test_missing_column(self, tmp_path):
        path = tmp_path / "parties.csv"
        path.write_text("id,lr,seats\nA,1,10\n")

        with pytest.raises(ValidationError) as exc:
            PartyTable.from_csv(path)
        assert exc.value.field == "conlib"

    def test_numeric_ids(self, tmp_path):
        path = tmp_path / "parties.csv"
        path.write_text("id,lr,conlib,seats\n1,0,0,50\n2,1,1,51\n")

        table = PartyTable.from_csv(path)
        assert table.ids == ["1", "2"]
        assert table.majority_threshold == 51

    def test_out_of_range(self, tmp_path):
        path = tmp_path / "parties.csv"
        path.write_text("id,lr,conlib,seats\nA,12,0,10\n")

        with pytest.raises(ValidationError) as exc:
            PartyTable.from_csv(path)
        assert exc.value.field == "lr"
