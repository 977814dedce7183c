import pytest

from models.context import CONTEXT_COURSE, CONTEXT_MODULE, CONTEXT_SYSTEM


class TestContextService:
    """Tests for ContextService."""

    def test_create_and_find(self, services):
        """Test a created context can be found again."""
        created = services.contexts.create(CONTEXT_COURSE, "Algebra 101", lang="fr")

        found = services.contexts.find(created.id)

        assert found == created
        assert found.lang == "fr"

    def test_find_not_found(self, services):
        """Test finding a non-existent context returns None."""
        assert services.contexts.find(9999) is None

    def test_create_unknown_level_raises_error(self, services):
        """Test unknown context levels are rejected."""
        with pytest.raises(ValueError, match="Unknown context level: 12"):
            services.contexts.create(12, "Nowhere")

    def test_find_all_ordered_by_level(self, services):
        """Test find_all orders by level, then id."""
        module = services.contexts.create(CONTEXT_MODULE, "Quiz 1")
        course = services.contexts.create(CONTEXT_COURSE, "Algebra")
        system = services.contexts.create(CONTEXT_SYSTEM, "")

        assert [c.id for c in services.contexts.find_all()] == [system.id, course.id, module.id]

    def test_find_many_keeps_given_order(self, services):
        """Test find_many returns contexts in the order asked for."""
        first = services.contexts.create(CONTEXT_COURSE, "First")
        second = services.contexts.create(CONTEXT_COURSE, "Second")

        contexts = services.contexts.find_many([second.id, first.id])

        assert [c.name for c in contexts] == ["Second", "First"]

    def test_find_many_missing_raises_error(self, services):
        """Test find_many fails on an unknown id."""
        services.contexts.create(CONTEXT_COURSE, "First")

        with pytest.raises(ValueError, match="Context with ID 404 not found"):
            services.contexts.find_many([404])


class TestContextName:
    """Tests for Context.get_context_name."""

    def test_course_name_has_prefix(self, services, strings):
        context = services.contexts.create(CONTEXT_COURSE, "Algebra 101")

        assert context.get_context_name(strings) == "Course: Algebra 101"
        assert context.get_context_name(strings, with_prefix=False) == "Algebra 101"

    def test_system_context_is_level_label(self, services, strings):
        context = services.contexts.create(CONTEXT_SYSTEM, "")

        assert context.get_context_name(strings) == "System"

    def test_module_context(self, services, strings):
        context = services.contexts.create(CONTEXT_MODULE, "Quiz 1")

        assert context.get_context_name(strings) == "Activity module: Quiz 1"
