from __future__ import annotations

from splitshare.app import SplitShareApp
from splitshare.models import Split, SplitType
from splitshare.services.settlement import format_transfers


def setup_users_and_group(app: SplitShareApp) -> None:
    app.create_user("U1001", "User1")
    app.create_user("U2001", "User2")
    app.create_user("U3001", "User3")
    app.create_group("G1001", "Outing with Friends", "U1001")


def run_demo(app: SplitShareApp | None = None) -> SplitShareApp:
    app = app or SplitShareApp()
    setup_users_and_group(app)

    group = app.add_member("G1001", "U2001")
    app.add_member("G1001", "U3001")
    u1, u2, u3 = (app.users.get(user_id) for user_id in ("U1001", "U2001", "U3001"))

    group.create_expense(
        "Exp1001",
        "Breakfast",
        900,
        [Split(u1, 300), Split(u2, 300), Split(u3, 300)],
        SplitType.EQUAL,
        u1,
    )
    group.create_expense(
        "Exp1002",
        "Lunch",
        500,
        [Split(u1, 400), Split(u2, 100)],
        SplitType.UNEQUAL,
        u2,
    )
    # split values are percentages for this one
    group.create_expense(
        "Exp1003",
        "Taxi",
        200,
        [Split(u1, 50), Split(u2, 50)],
        SplitType.PERCENTAGE,
        u1,
    )
    return app


def main() -> None:
    app = run_demo()
    print(app.format_balances())
    print()
    print("Suggested settlements:")
    print(format_transfers(app.suggest_settlements()))
