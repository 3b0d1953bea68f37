from abc import ABC, abstractmethod
from typing import Callable, Optional, TextIO

from expense_tracker import (
    TransactionList, ExpenseTrackerConsole, format_currency, write_report
)


# ==================== Adapter Pattern ====================

class ExpenseTrackerAdapter(ABC):
    """Report capability expected by the exporting side"""

    @abstractmethod
    def generate_text_report(self, file_name: str) -> None:
        pass


class TransactionListAdapter(TransactionList, ExpenseTrackerAdapter):
    """Class adapter: a TransactionList that can export itself as a text report"""

    def generate_text_report(self, file_name: str) -> None:
        with open(file_name, 'w', encoding='utf-8') as f:
            write_report(self.get_transactions(), f, format_currency)


# ==================== Console Program ====================

def build_console(transaction_list: Optional[TransactionListAdapter] = None,
                  input_func: Callable[[str], str] = input,
                  out: Optional[TextIO] = None) -> ExpenseTrackerConsole:
    """Six-option menu backed by a TransactionListAdapter"""
    if transaction_list is None:
        transaction_list = TransactionListAdapter()
    console = ExpenseTrackerConsole(transaction_list, input_func, out)

    console.add_option("Add expense", console.add_expense)
    console.add_option("Add income", console.add_income)
    console.add_option("View transactions", console.view_transactions)
    console.add_option("Export report",
                       lambda: console.export_to_file(transaction_list.generate_text_report))
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


# Expense Tracker (Adapter) - Design Notes
#
# TransactionListAdapter inherits the ledger and implements the report
# interface, so the export code talks to ExpenseTrackerAdapter and never to
# the ledger's internals. Amounts in the file report use US currency format.
