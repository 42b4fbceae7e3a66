"""Streamlit page for a group's shared ledger."""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal

import altair as alt
import streamlit as st

from src.domain.errors import LedgerError, NotGroupMemberError
from src.domain.models.history import ExpenseHistoryItem, HistoryItem
from src.domain.models.ledger import Member, MemberBalance
from src.infrastructure.container import (
    build_create_expense_use_case,
    build_delete_expense_use_case,
    build_edit_expense_use_case,
    build_group_balances_use_case,
    build_group_history_use_case,
    build_group_members_use_case,
    build_record_settlement_use_case,
)
from src.infrastructure.logging.logger import get_usage_logger
from src.infrastructure.settings import LedgerSettings


def _fetch_members(group_id: int, actor_id: int) -> list[Member]:
    """Fetch the group's members for the acting member."""
    use_case = build_group_members_use_case()
    return use_case.execute(group_id=group_id, actor_id=actor_id)


def _fetch_balances(group_id: int, actor_id: int) -> list[MemberBalance]:
    """Recompute the group's balances."""
    use_case = build_group_balances_use_case()
    return use_case.execute(group_id=group_id, actor_id=actor_id)


def _fetch_history(group_id: int, actor_id: int) -> list[HistoryItem]:
    """Load the merged history feed."""
    use_case = build_group_history_use_case()
    return use_case.execute(group_id=group_id, actor_id=actor_id)


def _format_currency(value: Decimal, currency_code: str) -> str:
    """Format currency values for display."""
    symbol = "€" if currency_code == "EUR" else currency_code
    return f"{value:,.2f} {symbol}"


def _format_balance(value: Decimal, currency_code: str) -> str:
    """Format a signed balance for display."""
    sign = "+" if value > 0 else ""
    return f"{sign}{_format_currency(value, currency_code)}"


def _balance_chart_data(
    balances: Sequence[MemberBalance],
    currency_code: str,
) -> list[dict[str, str | float]]:
    """Prepare Altair-ready rows, one per member."""
    return [
        {
            "member": item.display_name,
            "balance": float(item.balance),
            "balance_label": _format_balance(item.balance, currency_code),
            "status": "owed" if item.balance >= 0 else "owes",
        }
        for item in balances
    ]


def _history_rows(
    history: Sequence[HistoryItem],
    currency_code: str,
) -> list[dict[str, str]]:
    """Flatten history items into table rows."""
    rows = []
    for item in history:
        if isinstance(item, ExpenseHistoryItem):
            detail = item.description
            who = f"{item.payer_name} for {', '.join(item.participant_names)}"
        else:
            detail = "Settlement"
            who = f"{item.payer_name} → {item.receiver_name}"
        rows.append(
            {
                "Date": item.occurred_at.date().isoformat(),
                "Type": item.kind,
                "Amount": _format_currency(item.amount, currency_code),
                "Who": who,
                "Detail": detail,
            }
        )
    return rows


def _check_altair_dependencies() -> tuple[bool, str | None]:
    """Check that the array libraries Altair charts rely on import cleanly.

    Returns:
        tuple[bool, str | None]: Whether charts can render, and why not.
    """
    try:
        import numpy
        import pandas
    except ImportError as exc:
        return False, f"Charts unavailable: {exc}"
    if not hasattr(numpy, "ndarray"):
        return False, "Charts unavailable: numpy import is incomplete."
    if not hasattr(pandas, "Timestamp"):
        return False, "Charts unavailable: pandas import is incomplete."
    return True, None


def _render_balances(
    balances: Sequence[MemberBalance],
    currency_code: str,
) -> None:
    """Render the member balances as a bar chart and a table."""
    st.subheader("Balances")
    if not balances:
        st.info("No members in this group yet.")
        return
    data = _balance_chart_data(balances, currency_code)
    charts_ok, reason = _check_altair_dependencies()
    if charts_ok:
        _render_balance_chart(data, currency_code)
    else:
        st.warning(reason)
    st.dataframe(
        [
            {"Member": row["member"], "Balance": row["balance_label"]}
            for row in data
        ],
        width="stretch",
        hide_index=True,
    )


def _render_balance_chart(
    data: list[dict[str, str | float]],
    currency_code: str,
) -> None:
    chart = alt.Chart(alt.Data(values=data)).mark_bar(
        cornerRadius=4,
    ).encode(
        x=alt.X("balance:Q", title=f"Balance ({currency_code})"),
        y=alt.Y("member:N", sort="-x", title=None),
        color=alt.Color(
            "status:N",
            scale=alt.Scale(
                domain=["owed", "owes"],
                range=["#2e7d32", "#e76f51"],
            ),
            legend=None,
        ),
        tooltip=[
            alt.Tooltip("member:N"),
            alt.Tooltip("balance_label:N"),
        ],
    )
    st.altair_chart(chart, width="stretch")


def _render_history(
    history: Sequence[HistoryItem],
    currency_code: str,
) -> None:
    """Render the merged history table."""
    st.subheader("History")
    if not history:
        st.info("No expenses or settlements recorded yet.")
        return
    st.dataframe(
        _history_rows(history, currency_code),
        width="stretch",
        hide_index=True,
    )


def _member_label(members: Sequence[Member]):
    names = {member.member_id: member.display_name for member in members}
    return lambda member_id: names.get(member_id, str(member_id))


def _render_expense_form(
    group_id: int,
    actor_id: int,
    members: Sequence[Member],
) -> None:
    """Render the form adding an expense split across participants."""
    member_ids = [member.member_id for member in members]
    label = _member_label(members)
    with st.form("add_expense", clear_on_submit=True):
        description = st.text_input("Description")
        amount = st.number_input("Amount", min_value=0.0, step=0.01)
        payer_id = st.selectbox("Paid by", member_ids, format_func=label)
        expense_date = st.date_input("Date", value=date.today())
        participant_ids = st.multiselect(
            "Split between",
            member_ids,
            default=member_ids,
            format_func=label,
        )
        submitted = st.form_submit_button("Add expense")
    if not submitted:
        return
    try:
        expense = build_create_expense_use_case().execute(
            group_id=group_id,
            actor_id=actor_id,
            payer_id=payer_id,
            amount=str(amount),
            description=description,
            expense_date=expense_date,
            participant_ids=participant_ids,
        )
    except LedgerError as exc:
        st.error(str(exc))
        return
    get_usage_logger().info(
        f"member={actor_id} group={group_id} "
        f"action=create_expense id={expense.expense_id}"
    )
    st.success(f"Expense '{expense.description}' added.")


def _render_settlement_form(
    group_id: int,
    actor_id: int,
    members: Sequence[Member],
) -> None:
    """Render the form recording a payment between two members."""
    member_ids = [member.member_id for member in members]
    label = _member_label(members)
    with st.form("record_settlement", clear_on_submit=True):
        payer_id = st.selectbox("Paid by", member_ids, format_func=label)
        receiver_id = st.selectbox("Paid to", member_ids, format_func=label)
        amount = st.number_input("Amount", min_value=0.0, step=0.01)
        submitted = st.form_submit_button("Record settlement")
    if not submitted:
        return
    try:
        recorded = build_record_settlement_use_case().execute(
            group_id=group_id,
            actor_id=actor_id,
            payer_id=payer_id,
            receiver_id=receiver_id,
            amount=str(amount),
        )
    except LedgerError as exc:
        st.error(str(exc))
        return
    get_usage_logger().info(
        f"member={actor_id} group={group_id} action=record_settlement "
        f"id={recorded.settlement.settlement_id}"
    )
    st.success(
        f"{recorded.payer_name} paid {recorded.receiver_name} "
        f"{recorded.settlement.amount}."
    )


def _render_manage_expense(
    group_id: int,
    actor_id: int,
    members: Sequence[Member],
    history: Sequence[HistoryItem],
) -> None:
    """Render edit and delete controls for an existing expense."""
    expenses = [
        item for item in history if isinstance(item, ExpenseHistoryItem)
    ]
    if not expenses:
        st.info("No expenses to edit.")
        return
    by_id = {item.item_id: item for item in expenses}
    expense_id = st.selectbox(
        "Expense",
        list(by_id),
        format_func=lambda item_id: (
            f"#{item_id} {by_id[item_id].description} "
            f"({by_id[item_id].occurred_at.date().isoformat()})"
        ),
    )
    selected = by_id[expense_id]
    member_ids = [member.member_id for member in members]
    label = _member_label(members)
    with st.form("edit_expense"):
        description = st.text_input("Description", value=selected.description)
        amount = st.number_input(
            "Amount",
            min_value=0.0,
            step=0.01,
            value=float(selected.amount),
        )
        payer_id = st.selectbox(
            "Paid by",
            member_ids,
            index=member_ids.index(selected.payer_id)
            if selected.payer_id in member_ids
            else 0,
            format_func=label,
        )
        expense_date = st.date_input("Date", value=selected.occurred_at.date())
        participant_ids = st.multiselect(
            "Split between",
            member_ids,
            default=[
                member_id
                for member_id in selected.participant_ids
                if member_id in member_ids
            ],
            format_func=label,
        )
        save = st.form_submit_button("Save changes")
    delete = st.button("Delete expense", type="secondary")

    try:
        if save:
            build_edit_expense_use_case().execute(
                group_id=group_id,
                actor_id=actor_id,
                expense_id=expense_id,
                payer_id=payer_id,
                amount=str(amount),
                description=description,
                expense_date=expense_date,
                participant_ids=participant_ids,
            )
            action = "edit_expense"
        elif delete:
            build_delete_expense_use_case().execute(
                group_id=group_id,
                actor_id=actor_id,
                expense_id=expense_id,
            )
            action = "delete_expense"
        else:
            return
    except LedgerError as exc:
        st.error(str(exc))
        return
    get_usage_logger().info(
        f"member={actor_id} group={group_id} action={action} id={expense_id}"
    )
    st.success("Expense updated." if save else "Expense deleted.")


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Shared Ledger", layout="wide")
    st.title("Shared Ledger")

    group_id = int(
        st.sidebar.number_input("Group ID", min_value=1, step=1, value=1)
    )
    actor_id = int(
        st.sidebar.number_input(
            "Acting member ID",
            min_value=1,
            step=1,
            value=1,
        )
    )

    try:
        members = _fetch_members(group_id, actor_id)
    except NotGroupMemberError:
        st.warning("You are not a member of this group.")
        return
    settings = LedgerSettings.from_env()

    expense_tab, settlement_tab, manage_tab = st.tabs(
        ["Add expense", "Record settlement", "Edit or delete"]
    )
    with expense_tab:
        _render_expense_form(group_id, actor_id, members)
    with settlement_tab:
        _render_settlement_form(group_id, actor_id, members)
    with manage_tab:
        _render_manage_expense(
            group_id,
            actor_id,
            members,
            _fetch_history(group_id, actor_id),
        )

    # Re-read after the forms above may have written.
    balances = _fetch_balances(group_id, actor_id)
    history = _fetch_history(group_id, actor_id)
    balances_col, history_col = st.columns(2)
    with balances_col:
        _render_balances(balances, settings.currency_code)
    with history_col:
        _render_history(history, settings.currency_code)


if __name__ == "__main__":  # pragma: no cover
    main()
