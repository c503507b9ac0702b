"""
Test suite for optional predicate builders.

System role: Verification of dynamic WHERE clause assembly
"""

import pytest
from sqlalchemy import select

from querylab.boundary.db.models import Member
from querylab.core.query import all_of, optional_eq, optional_goe, optional_loe, where_present


class TestOptionalPredicates:
    """Test suite for optional_eq/optional_goe/optional_loe."""

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_optional_eq_should_skip_absent_values(self, value) -> None:
        """Test None and blank strings produce no predicate."""
        assert optional_eq(Member.username, value) is None

    def test_optional_eq_should_build_equality(self) -> None:
        """Test a present value becomes column = value."""
        predicate = optional_eq(Member.username, "member1")

        assert str(predicate) == "members.username = :username_1"

    def test_optional_goe_should_keep_zero(self) -> None:
        """Test 0 is a real bound, not an absent one."""
        predicate = optional_goe(Member.age, 0)

        assert predicate is not None
        assert str(predicate) == "members.age >= :age_1"

    def test_optional_loe_should_skip_none(self) -> None:
        """Test None upper bound produces no predicate."""
        assert optional_loe(Member.age, None) is None
        assert str(optional_loe(Member.age, 40)) == "members.age <= :age_1"


class TestCombining:
    """Test suite for all_of() and where_present()."""

    def test_all_of_with_nothing_present_should_be_none(self) -> None:
        """Test all-absent input yields None."""
        assert all_of(None, None) is None

    def test_all_of_with_one_present_should_return_it(self) -> None:
        """Test a single predicate is returned as-is."""
        predicate = Member.age >= 10

        assert all_of(None, predicate) is predicate

    def test_all_of_should_and_present_predicates(self) -> None:
        """Test several predicates are AND-ed."""
        combined = all_of(Member.age >= 10, None, Member.age <= 20)

        assert str(combined) == "members.age >= :age_1 AND members.age <= :age_2"

    def test_where_present_should_leave_statement_unchanged(self) -> None:
        """Test no predicates means no WHERE clause."""
        stmt = select(Member)

        assert where_present(stmt, None, None) is stmt

    def test_where_present_should_filter_none(self) -> None:
        """Test only present predicates reach the WHERE clause."""
        stmt = where_present(
            select(Member),
            optional_eq(Member.username, "member1"),
            optional_goe(Member.age, None),
        )

        sql = str(stmt)
        assert "WHERE members.username = :username_1" in sql
        assert "age >=" not in sql
