from enum import Enum
from typing import Callable, List, Optional, TextIO
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
import sys


REPORT_TITLE = "Expense Tracker Report"
REPORT_RULE = "-" * 23
APP_TITLE = "Expense Tracker"
APP_RULE = "-" * 16


# ==================== Enums ====================

class TransactionType(Enum):
    """Direction of a transaction"""
    EXPENSE = "Expense"
    INCOME = "Income"


# ==================== Core Models ====================

@dataclass(frozen=True)
class Transaction:
    """A single ledger entry"""
    amount: Decimal
    category: str
    type: TransactionType

    def __str__(self) -> str:
        return f"{self.category}: {self.amount}$ ({self.type.value})"


@dataclass(frozen=True)
class ReportTotals:
    """Aggregated amounts for a report"""
    total_expenses: Decimal
    total_income: Decimal

    @property
    def net_balance(self) -> Decimal:
        return self.total_income - self.total_expenses


class TransactionList:
    """In-memory ledger of transactions"""

    def __init__(self):
        self._transactions: List[Transaction] = []

    def add_transaction(self, amount, category: str,
                        transaction_type: TransactionType) -> Transaction:
        transaction = Transaction(Decimal(str(amount)), category, transaction_type)
        self._transactions.append(transaction)
        return transaction

    def clear_transactions(self) -> None:
        self._transactions.clear()

    def get_transactions(self) -> List[Transaction]:
        return self._transactions.copy()

    def view_transactions(self, out: Optional[TextIO] = None) -> None:
        out = out or sys.stdout
        print("Transactions:", file=out)
        for transaction in self._transactions:
            print(transaction, file=out)

    def __len__(self) -> int:
        return len(self._transactions)


# ==================== Report Helpers ====================

def summarize(transactions: List[Transaction]) -> ReportTotals:
    """Sum expenses and income separately"""
    total_expenses = Decimal('0')
    total_income = Decimal('0')

    for transaction in transactions:
        if transaction.type == TransactionType.EXPENSE:
            total_expenses += transaction.amount
        else:
            total_income += transaction.amount

    return ReportTotals(total_expenses, total_income)


def format_currency(amount: Decimal) -> str:
    """Format as US currency, e.g. $1,234.50 or -$3.00"""
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"


def write_report(transactions: List[Transaction], out: TextIO,
                 money_format: Callable[[Decimal], str]) -> ReportTotals:
    """Write the standard report layout using money_format for every amount"""
    print(REPORT_TITLE, file=out)
    print(REPORT_RULE, file=out)
    print("Transactions:", file=out)

    for transaction in transactions:
        print(f"{transaction.type.value}: {transaction.category} - "
              f"{money_format(transaction.amount)}", file=out)

    totals = summarize(transactions)
    print(file=out)
    print(f"Total Expenses: {money_format(totals.total_expenses)}", file=out)
    print(f"Total Income: {money_format(totals.total_income)}", file=out)
    print(f"Net Balance: {money_format(totals.net_balance)}", file=out)
    return totals


# ==================== Console Session ====================

@dataclass
class MenuOption:
    """One numbered entry of the console menu; action returns False to exit"""
    label: str
    action: Callable[[], bool]


class ExpenseTrackerConsole:
    """
    Numbered-menu console loop.
    Input comes from input_func (builtin input by default) and all output goes
    to out, so sessions can be scripted.
    """

    def __init__(self, transaction_list: TransactionList,
                 input_func: Callable[[str], str] = input,
                 out: Optional[TextIO] = None):
        self._transaction_list = transaction_list
        self._input = input_func
        self._out = out or sys.stdout
        self._options: List[MenuOption] = []

    def get_transaction_list(self) -> TransactionList:
        return self._transaction_list

    def get_output(self) -> TextIO:
        return self._out

    def add_option(self, label: str, action: Callable[[], bool]) -> None:
        self._options.append(MenuOption(label, action))

    def say(self, message: str = "") -> None:
        print(message, file=self._out)

    def prompt(self, text: str) -> str:
        return self._input(text).strip()

    def show_menu(self) -> None:
        self.say(APP_TITLE)
        self.say(APP_RULE)
        for number, option in enumerate(self._options, start=1):
            self.say(f"{number}. {option.label}")
        self.say()

    def run(self) -> None:
        """Loop until an action asks to stop or input runs out"""
        while True:
            self.show_menu()
            try:
                choice = self.prompt("Enter your choice: ")
            except EOFError:
                self.say()
                return

            option = self._select(choice)
            if option is None:
                self.say("Invalid input. Please try again.")
                continue

            if not option.action():
                return

    def _select(self, choice: str) -> Optional[MenuOption]:
        if not choice.isdecimal():
            return None
        index = int(choice) - 1
        if 0 <= index < len(self._options):
            return self._options[index]
        return None

    # ---- Shared actions ----

    def add_transaction(self, transaction_type: TransactionType) -> bool:
        """Prompt for amount and category; rejects bad input without adding"""
        raw_amount = self.prompt("Enter amount: ")
        # plain decimal notation only, no exponents
        if 'e' in raw_amount.lower():
            self.say("Invalid amount. Please enter a positive number.")
            return True

        try:
            amount = Decimal(raw_amount)
        except InvalidOperation:
            self.say("Invalid amount. Please enter a positive number.")
            return True

        if not amount.is_finite() or amount <= 0:
            self.say("Invalid amount. Please enter a positive number.")
            return True

        category = self.prompt("Enter category: ")
        if not category:
            self.say("Category cannot be empty.")
            return True

        self._transaction_list.add_transaction(amount, category, transaction_type)
        self.say("Transaction added successfully.")
        return True

    def add_expense(self) -> bool:
        return self.add_transaction(TransactionType.EXPENSE)

    def add_income(self) -> bool:
        return self.add_transaction(TransactionType.INCOME)

    def view_transactions(self) -> bool:
        self._transaction_list.view_transactions(self._out)
        return True

    def clear_transactions(self) -> bool:
        self._transaction_list.clear_transactions()
        self.say("All transactions cleared.")
        return True

    def export_to_file(self, export: Callable[[str], None]) -> bool:
        """Ask for a file name and hand it to export; I/O errors are reported"""
        file_name = self.prompt("Enter file name: ")
        if not file_name:
            self.say("File name cannot be empty.")
            return True

        try:
            export(file_name)
        except OSError as e:
            self.say(f"Failed to write report to {file_name}: {e}")
            return True

        self.say(f"Report exported to {file_name}")
        return True

    def exit(self) -> bool:
        self.say("Thank you for using Expense Tracker!")
        return False
