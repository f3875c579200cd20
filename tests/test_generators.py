"""Tests for sample data generators."""

from decimal import Decimal

from generic_bank.generators.banking import AccountGenerator, CustomerGenerator


class TestCustomerGenerator:
    """Tests for CustomerGenerator."""

    def test_generate_customer(self, seed: int) -> None:
        customer = CustomerGenerator(seed=seed).generate()

        assert customer.name
        assert customer.document

    def test_generate_multiple(self, seed: int) -> None:
        customers = list(CustomerGenerator(seed=seed).generate_batch(5))

        assert len(customers) == 5
        assert len({c.id for c in customers}) == 5

    def test_seed_reproducible(self, seed: int) -> None:
        first = [c.name for c in CustomerGenerator(seed=seed).generate_batch(3)]
        second = [c.name for c in CustomerGenerator(seed=seed).generate_batch(3)]

        assert first == second

    def test_other_locale(self, seed: int) -> None:
        customer = CustomerGenerator(seed=seed, locale="pt_BR").generate()
        assert customer.name

    def test_excluded_fragment_never_generated(self, seed: int) -> None:
        gen = CustomerGenerator(seed=seed, exclude_name_fragment="a")
        names = [c.name for c in gen.generate_batch(50)]

        assert len(names) == 50
        assert all("a" not in name for name in names)


class TestAccountGenerator:
    """Tests for AccountGenerator."""

    def test_generate_account(self, seed: int) -> None:
        account = AccountGenerator(seed=seed).generate()

        assert account.account_number == "2001"
        assert AccountGenerator.MIN_OPENING <= account.balance <= AccountGenerator.MAX_OPENING
        assert account.balance == account.balance.quantize(Decimal("0.01"))

    def test_sequential_numbers(self, seed: int) -> None:
        accounts = list(AccountGenerator(seed=seed, start_number=5000).generate_batch(3))
        assert [a.account_number for a in accounts] == ["5000", "5001", "5002"]

    def test_generated_accounts_obey_rules(self, seed: int) -> None:
        account = AccountGenerator(seed=seed).generate()
        balance = account.balance

        assert not account.withdraw(balance + 1)
        assert account.withdraw(balance)
        assert account.balance == 0
