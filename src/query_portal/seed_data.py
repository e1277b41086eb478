"""Sample datasets loaded by the seed jobs."""

import csv
from pathlib import Path

from query_portal.domain.seeds import (
    AttendanceRecord,
    ChatSession,
    Company,
    Customer,
    FaqItem,
    WorkHoursRecord,
)

_DEFAULT_PASSWORD = "Test@123"


def _npn_reports(  # noqa: PLR0913
    *,
    account_types: list[str],
    working_capital: tuple[int, int, str],
    loans: list[tuple[str, int, float, int]],
    payment_methods: list[str],
    trade_finance: tuple[int, int, int, int, int, int],
    credit_report: tuple[int, str],
    treasury: tuple[bool, bool, bool],
) -> dict[str, object]:
    lc_limit, lc_used, bg_limit, bg_used, import_lc, export_credit = trade_finance
    return {
        "npn_reports": {
            "account_types": account_types,
            "working_capital": {
                "limit": working_capital[0],
                "utilized": working_capital[1],
                "last_review_date": working_capital[2],
            },
            "loans": [
                {
                    "type": loan_type,
                    "amount": amount,
                    "interest_rate": rate,
                    "tenure_months": tenure,
                }
                for loan_type, amount, rate, tenure in loans
            ],
            "payment_methods": payment_methods,
            "trade_finance": {
                "letter_of_credit": {"limit": lc_limit, "utilized": lc_used},
                "bank_guarantees": {"limit": bg_limit, "utilized": bg_used},
                "import_export": {
                    "import_lc_limit": import_lc,
                    "export_credit_limit": export_credit,
                },
            },
            "credit_reports": {
                "credit_score": credit_report[0],
                "last_updated": credit_report[1],
            },
            "treasury_services": {
                "forex_dealing": treasury[0],
                "forward_contracts": treasury[1],
                "derivatives": treasury[2],
            },
        }
    }


COMPANIES = [
    Company(
        id="ABC123",
        name="ABC Manufacturing Ltd",
        email="admin@abcmanufacturing.com",
        services=_npn_reports(
            account_types=["Current", "Savings", "Term Deposits"],
            working_capital=(5_000_000, 3_500_000, "2024-02-15"),
            loans=[
                ("Term Loan", 10_000_000, 8.5, 60),
                ("Equipment Loan", 2_500_000, 9.0, 36),
            ],
            payment_methods=["RTGS", "NEFT", "Letter of Credit", "Bank Guarantee"],
            trade_finance=(
                2_000_000,
                1_500_000,
                1_000_000,
                800_000,
                3_000_000,
                2_000_000,
            ),
            credit_report=(750, "2024-03-01"),
            treasury=(True, True, False),
        ),
    ),
    Company(
        id="XYZ456",
        name="XYZ Trading Co",
        email="admin@xyztrading.com",
        services=_npn_reports(
            account_types=["Current", "Overdraft"],
            working_capital=(3_000_000, 2_000_000, "2024-01-20"),
            loans=[("Working Capital Loan", 5_000_000, 9.5, 12)],
            payment_methods=["RTGS", "NEFT", "Bank Guarantee"],
            trade_finance=(
                1_500_000,
                1_000_000,
                500_000,
                300_000,
                2_000_000,
                1_500_000,
            ),
            credit_report=(720, "2024-02-15"),
            treasury=(True, False, False),
        ),
    ),
    Company(
        id="PQR789",
        name="PQR Industries",
        email="admin@pqrindustries.com",
        services=_npn_reports(
            account_types=["Current", "Savings", "Term Deposits", "Overdraft"],
            working_capital=(8_000_000, 6_000_000, "2024-03-01"),
            loans=[
                ("Term Loan", 15_000_000, 8.0, 84),
                ("Project Finance", 20_000_000, 8.75, 120),
            ],
            payment_methods=[
                "RTGS",
                "NEFT",
                "Letter of Credit",
                "Bank Guarantee",
                "SWIFT",
            ],
            trade_finance=(
                5_000_000,
                3_500_000,
                2_000_000,
                1_500_000,
                6_000_000,
                4_000_000,
            ),
            credit_report=(800, "2024-03-10"),
            treasury=(True, True, True),
        ),
    ),
]


def _customer(  # noqa: PLR0913
    email: str,
    name: str,
    company_id: str,
    role: str,
    department: str,
    position: str,
) -> Customer:
    return Customer(
        email=email,
        name=name,
        company_id=company_id,
        role=role,
        password=_DEFAULT_PASSWORD,
        access_code=company_id,
        department=department,
        position=position,
    )


CUSTOMERS = [
    _customer(
        "john@abcmanufacturing.com",
        "John Smith",
        "ABC123",
        "admin",
        "Finance",
        "Finance Manager",
    ),
    _customer(
        "sarah@xyztrading.com",
        "Sarah Johnson",
        "XYZ456",
        "admin",
        "Treasury",
        "Treasury Manager",
    ),
    _customer(
        "mike@pqrindustries.com", "Mike Wilson", "PQR789", "admin", "Finance", "CFO"
    ),
    _customer(
        "alice@abcmanufacturing.com",
        "Alice Brown",
        "ABC123",
        "user",
        "Accounts",
        "Account Manager",
    ),
    _customer(
        "bob@xyztrading.com",
        "Bob Davis",
        "XYZ456",
        "user",
        "Trade Finance",
        "Trade Finance Officer",
    ),
    _customer(
        "emma@pqrindustries.com",
        "Emma Clark",
        "PQR789",
        "user",
        "Credit",
        "Credit Analyst",
    ),
]


def _chat(  # noqa: PLR0913
    company_id: str,
    user_id: str,
    user_name: str,
    timestamp: str,
    question: str,
    answer: str,
    topic: str,
    department: str,
) -> ChatSession:
    return ChatSession(
        company_id=company_id,
        user_id=user_id,
        user_name=user_name,
        timestamp=timestamp,
        messages=[
            {"role": "user", "content": question},
            {"role": "assistant", "content": answer},
        ],
        metadata={"topic": topic, "department": department},
    )


CHAT_SESSIONS = [
    _chat(
        "ABC123",
        "john@abcmanufacturing.com",
        "John Smith",
        "2024-03-15T10:00:00",
        "What is our current working capital limit?",
        "Your working capital limit is 5,000,000 with current utilization of "
        "3,500,000 as of February 15, 2024.",
        "Working Capital",
        "Finance",
    ),
    _chat(
        "XYZ456",
        "sarah@xyztrading.com",
        "Sarah Johnson",
        "2024-03-15T11:00:00",
        "Show me our letter of credit limits",
        "Your LC limit is 1,500,000 with current utilization of 1,000,000.",
        "Trade Finance",
        "Treasury",
    ),
    _chat(
        "PQR789",
        "mike@pqrindustries.com",
        "Mike Wilson",
        "2024-03-15T12:00:00",
        "What are our current loan details?",
        "You have two active loans: 1) Term Loan of 15,000,000 at 8.0% for 84 "
        "months 2) Project Finance of 20,000,000 at 8.75% for 120 months",
        "Loans",
        "Finance",
    ),
]

ATTENDANCE = [
    AttendanceRecord(
        access_code="1T3V1J",
        month="2025-05",
        absent_dates=["2025-05-05", "2025-05-16", "2025-05-29"],
    ),
    AttendanceRecord(
        access_code="ZDU5Z5", month="2025-04", absent_dates=["2025-04-04", "2025-04-08"]
    ),
    AttendanceRecord(
        access_code="8B1AA3",
        month="2025-05",
        absent_dates=["2025-05-10", "2025-05-11", "2025-05-23"],
    ),
    AttendanceRecord(
        access_code="MQBEXO",
        month="2025-04",
        absent_dates=["2025-04-03", "2025-04-10", "2025-04-21"],
    ),
    AttendanceRecord(
        access_code="MQBEXO",
        month="2025-05",
        absent_dates=["2025-05-01", "2025-05-15", "2025-05-28"],
    ),
    AttendanceRecord(
        access_code="MQBEXO", month="2025-06", absent_dates=["2025-06-03", "2025-06-02"]
    ),
]

WORK_HOURS = [
    WorkHoursRecord(
        access_code="1T3V1J", month="2025-05", hours_worked=132, total_hours=160
    ),
    WorkHoursRecord(
        access_code="ZDU5Z5", month="2025-05", hours_worked=145, total_hours=160
    ),
    WorkHoursRecord(
        access_code="MQBEXO", month="2025-05", hours_worked=120, total_hours=160
    ),
]


FAQS = [
    FaqItem(
        question="What are my current account balances?",
        answer=(
            "I can help you check your account balances. Your current balances "
            "are available in the Bank_Accounts section of your profile. Would "
            "you like me to show you the details?"
        ),
        keywords=["balance", "account", "money", "available", "current balance"],
        category="accounts",
    ),
    FaqItem(
        question="How do I check my transaction history?",
        answer=(
            "You can view your transaction history in several ways:\n"
            "1. Ask me about transactions for a specific time period "
            "(e.g., 'Show last month's transactions')\n"
            "2. Ask about specific categories "
            "(e.g., 'Show my recent food expenses')\n"
            "3. Check specific date ranges\n"
            "What would you like to know?"
        ),
        keywords=["transaction", "history", "spending", "expenses", "payments"],
        category="transactions",
    ),
    FaqItem(
        question="What are my loan details?",
        answer=(
            "I can help you check your loan information including:\n"
            "- Current outstanding amounts\n"
            "- Interest rates\n"
            "- EMI details\n"
            "- Loan terms and conditions\n"
            "Which specific loan information would you like to know?"
        ),
        keywords=["loan", "emi", "interest", "borrowing", "debt"],
        category="loans",
    ),
    FaqItem(
        question="How do I check my credit score?",
        answer=(
            "Your current credit score and report are available in the "
            "Credit_Reports section. This includes:\n"
            "- Credit score\n"
            "- Credit history\n"
            "- Recent inquiries\n"
            "- Credit utilization\n"
            "Would you like me to show you these details?"
        ),
        keywords=["credit", "score", "cibil", "rating"],
        category="credit",
    ),
    FaqItem(
        question="What are my KYC details?",
        answer=(
            "I can help you check your KYC (Know Your Customer) details "
            "including:\n"
            "- Verification status\n"
            "- Submitted documents\n"
            "- Last verification date\n"
            "- Required updates if any\n"
            "Which KYC information would you like to see?"
        ),
        keywords=["kyc", "verification", "documents", "identity"],
        category="kyc",
    ),
]

def read_employee_rows(path: Path) -> list[dict[str, object]]:
    """Read the HR CSV export into rows ready for the employee schema.

    ``Experience (Years)`` becomes a numeric ``Experience`` column; empty
    values are dropped.
    """
    with path.open(newline="", encoding="utf-8-sig") as handle:
        reader = csv.DictReader(handle)
        rows = []
        for raw in reader:
            row: dict[str, object] = {
                key.strip(): value.strip()
                for key, value in raw.items()
                if key and value and value.strip()
            }
            experience = row.pop("Experience (Years)", None)
            if experience is not None:
                row["Experience"] = experience
            rows.append(row)
    return rows
