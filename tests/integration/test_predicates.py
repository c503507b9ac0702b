"""
Test suite for the comparison operators available on mapped columns.

Each case runs a real SELECT over the tutorial fixture and checks which
usernames come back.

System role: Verification of predicate operators used by the query examples
"""

import pytest
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from querylab.boundary.db.models import Member
from querylab.boundary.db.seed import TutorialFixture
from querylab.core.query import fetch


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("predicate", "expected"),
    [
        pytest.param(Member.username != "member1", ["member2", "member3", "member4"], id="ne"),
        pytest.param(Member.username.is_not(None), ["member1", "member2", "member3", "member4"], id="is_not_null"),
        pytest.param(Member.age.in_([10, 20]), ["member1", "member2"], id="in"),
        pytest.param(Member.age.not_in([10, 20]), ["member3", "member4"], id="not_in"),
        pytest.param(Member.age.between(10, 30), ["member1", "member2", "member3"], id="between"),
        pytest.param(Member.age >= 30, ["member3", "member4"], id="goe"),
        pytest.param(Member.age > 30, ["member4"], id="gt"),
        pytest.param(Member.age <= 20, ["member1", "member2"], id="loe"),
        pytest.param(Member.age < 20, ["member1"], id="lt"),
        pytest.param(Member.username.like("member%"), ["member1", "member2", "member3", "member4"], id="like"),
        pytest.param(Member.username.contains("ber1"), ["member1"], id="contains"),
        pytest.param(Member.username.startswith("member"), ["member1", "member2", "member3", "member4"], id="startswith"),
    ],
)
async def test_predicate_should_filter_members(
    test_async_db: AsyncSession,
    tutorial: TutorialFixture,
    predicate,
    expected: list[str],
) -> None:
    """Test each operator narrows the fixture to the expected usernames."""
    # Act
    members = await fetch(test_async_db, select(Member).where(predicate).order_by(Member.id))

    # Assert
    assert [m.username for m in members] == expected


@pytest.mark.asyncio
async def test_equality_with_none_should_not_match_null_usernames(
    test_async_db: AsyncSession,
    tutorial: TutorialFixture,
) -> None:
    """Test is_(None) is how NULL usernames are matched."""
    # Arrange
    test_async_db.add(Member(None, 5))

    # Act
    members = await fetch(test_async_db, select(Member).where(Member.username.is_(None)))

    # Assert
    assert [m.age for m in members] == [5]
