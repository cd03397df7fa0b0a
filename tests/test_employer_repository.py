"""
Testes do repositório de empregadores
"""
import logging

import pytest

from schemas.employers import Employer
from services.exceptions import ConstraintViolation


class TestEmployerRepository:
    def test_create_and_get(self, repo):
        e = repo.create(Employer(name="Acme", sector="Tech", summary="Anvils"))

        assert repo.get(e.id) == e
        assert repo.count() == 1

    def test_create_logs_new_id(self, repo, caplog):
        caplog.set_level(logging.INFO, logger="services.employer_repository")
        e = repo.create(Employer(name="Acme"))

        assert f"#{e.id} criado" in caplog.text

    def test_constraint_violation_propagates(self, repo):
        with pytest.raises(ConstraintViolation):
            repo.create(Employer(name=None))

    def test_create_or_update_inserts_then_updates(self, repo):
        """Mesmo fluxo do createOrUpdate: id manual, insert, muda setor, salva de novo"""
        e = Employer(name="Kraft Heinz", sector="Food", summary="A global food and beverage company!")
        e.id = 22

        first = repo.create_or_update(e)
        assert first.created is True
        assert first.updated is False

        e.sector = "Food/Beverage"
        second = repo.create_or_update(e)
        assert second.created is False
        assert second.updated is True
        assert second.rows_changed == 1

        assert repo.find_by("name", "Kraft Heinz")[0].sector == "Food/Beverage"
        assert repo.count() == 1

    def test_update_and_update_id(self, repo, two_employers):
        john, jack = repo.create_many(two_employers)
        john.summary = "Changed"

        assert repo.update(john) == 1
        novo_id = jack.id + 50
        assert repo.update_id(john, novo_id) == 1
        assert repo.get(novo_id).summary == "Changed"

        with pytest.raises(ConstraintViolation):
            repo.update_id(jack, novo_id)

    def test_delete_and_delete_many(self, repo, four_employers):
        created = repo.create_many(four_employers)

        assert repo.delete(created[0]) == 1
        assert repo.delete(created[0]) == 0
        assert repo.delete_many([]) == 0
        assert repo.delete_many(created[1:]) == 3
        assert repo.list_all() == []
