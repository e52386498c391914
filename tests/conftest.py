import pytest

from cardsplit.ledger import Ledger
from cardsplit.models import Category, Transaction
from cardsplit.session import Session

# Two-row export used throughout the scenarios
scenario_csv_text = (
    "Date,Ref,Payee,Addr,Amount\n"
    "01/15/2024,REF1,Chipotle,123 Main St,-15.67\n"
    "01/16/2024,REF2,Uber,SF,-32.45"
)

sample_csv_text = (
    "Posted Date,Reference Number,Payee,Address,Amount\n"
    '03/02/2025,24431065,"WHOLE FOODS MARKET","SAN FRANCISCO CA",-84.12\n'
    '03/01/2025,24492155,"Uber Trip","help.uber.com CA",-23.50\n'
    '\n'
    '03/05/2025,24692165,"AIRBNB","SAN FRANCISCO CA",-412.00\n'
    '03/04/2025,74692165,"PAYMENT THANK YOU","",250.00\n'
    '03/03/2025,55510022,"Trader Joe\'s","Oakland CA",-41.07\n'
)


def _make_transaction(id, posted_date='01/01/2025', payee='Test Payee', address='Test Address',
                      amount=-10.0, category=Category.UNCATEGORIZED, reference_number=None):
    """Helper to build a Transaction with sensible defaults"""
    return Transaction(
        id=id,
        posted_date=posted_date,
        reference_number=reference_number if reference_number is not None else f'REF{id}',
        payee=payee,
        address=address,
        amount=amount,
        category=category,
    )


@pytest.fixture
def create_transaction():
    """Helper fixture to create Transactions with default field values"""
    return _make_transaction


@pytest.fixture
def scenario_text():
    return scenario_csv_text


@pytest.fixture
def sample_text():
    return sample_csv_text


@pytest.fixture
def sample_file(tmp_path):
    """Sample export written to disk"""
    file_path = tmp_path / "card_export.csv"
    file_path.write_text(sample_csv_text, encoding='utf-8')
    return file_path


@pytest.fixture
def scenario_session(scenario_text):
    """Session loaded with the two-row scenario export"""
    session = Session()
    session.load_file(scenario_text.encode('utf-8'))
    return session


@pytest.fixture
def sample_session(sample_text):
    """Session loaded with the five-row sample export"""
    session = Session()
    session.load_file(sample_text.encode('utf-8'))
    return session


@pytest.fixture
def mixed_transactions():
    """Transactions spread over all categories with distinct sort keys"""
    return [
        _make_transaction(0, '01/15/2024', 'Chipotle', '123 Main St', -15.67, Category.SPLITWISE),
        _make_transaction(1, '01/16/2024', 'uber', 'San Francisco', -32.45, Category.PERSONAL),
        _make_transaction(2, '01/10/2024', 'Costco', 'Mountain View', 120.10, Category.UNCATEGORIZED),
        _make_transaction(3, '01/20/2024', 'Amazon', 'Seattle WA', -5.25, Category.SPLITWISE),
        _make_transaction(4, 'not a date', 'Blue Bottle', 'Oakland', -7.80, Category.UNCATEGORIZED),
    ]


@pytest.fixture
def mixed_ledger(mixed_transactions):
    return Ledger(mixed_transactions)
