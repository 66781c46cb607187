"""হিসাব রক্ষক: wallets, income, expenses, debts and receivables."""

__version__ = "0.1.0"


# The CLI pulls in the database layer, so main is only imported on access
def __getattr__(name):
    if name == "main":
        from hisab.cli.main import main
        return main
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
