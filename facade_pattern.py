from abc import ABC, abstractmethod
from typing import Callable, List, Optional, TextIO
from decimal import Decimal
import sys

from expense_tracker import (
    Transaction, TransactionList, ExpenseTrackerConsole, write_report
)


def format_amount(amount: Decimal) -> str:
    return f"{amount} $"


# ==================== Formatters ====================

class DataFormatter(ABC):
    """Renders a list of transactions somewhere"""

    @abstractmethod
    def format_data(self, transactions: List[Transaction]) -> None:
        pass


class ConsoleFormatter(DataFormatter):
    """Writes the report to a text stream (stdout by default)"""

    def __init__(self, out: Optional[TextIO] = None):
        self._out = out or sys.stdout

    def format_data(self, transactions: List[Transaction]) -> None:
        write_report(transactions, self._out, format_amount)


class FileFormatter(DataFormatter):
    """Writes the report to a file, replacing any previous contents"""

    def __init__(self, file_name: str):
        self._file_name = file_name

    def get_file_name(self) -> str:
        return self._file_name

    def format_data(self, transactions: List[Transaction]) -> None:
        with open(self._file_name, 'w', encoding='utf-8') as f:
            write_report(transactions, f, format_amount)


# ==================== Facade ====================

class ReportGenerator:
    """Single entry point that hides which formatter produces a report"""

    def generate_console_report(self, transaction_list: TransactionList,
                                out: Optional[TextIO] = None) -> None:
        formatter = ConsoleFormatter(out)
        formatter.format_data(transaction_list.get_transactions())

    def generate_file_report(self, transaction_list: TransactionList,
                             file_name: str) -> None:
        formatter = FileFormatter(file_name)
        formatter.format_data(transaction_list.get_transactions())


# ==================== Console Program ====================

def build_console(transaction_list: Optional[TransactionList] = None,
                  input_func: Callable[[str], str] = input,
                  out: Optional[TextIO] = None,
                  report_generator: Optional[ReportGenerator] = None) -> ExpenseTrackerConsole:
    """Seven-option menu; reports go through the ReportGenerator facade"""
    if transaction_list is None:
        transaction_list = TransactionList()
    if report_generator is None:
        report_generator = ReportGenerator()
    console = ExpenseTrackerConsole(transaction_list, input_func, out)

    def export_file_report() -> bool:
        return console.export_to_file(
            lambda file_name: report_generator.generate_file_report(transaction_list, file_name))

    def export_console_report() -> bool:
        report_generator.generate_console_report(transaction_list, console.get_output())
        return True

    console.add_option("Add expense", console.add_expense)
    console.add_option("Add income", console.add_income)
    console.add_option("View transactions", console.view_transactions)
    console.add_option("Export file report", export_file_report)
    console.add_option("Export console report", export_console_report)
    console.add_option("Clear all transactions", console.clear_transactions)
    console.add_option("Exit", console.exit)
    return console


def main():
    """Run the interactive expense tracker"""
    build_console().run()


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print("\n\nSession interrupted by user")
    except Exception as e:
        print(f"\n\nError occurred: {e}")
        import traceback
        traceback.print_exc()
