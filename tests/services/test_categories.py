import pytest

from tests.helpers import create_context_with_top, create_categories


class TestCategoryService:
    """Tests for CategoryService."""

    def test_create_category(self, services):
        """Test creating a category fills in the id and defaults."""
        context, top = create_context_with_top(services, "Algebra")

        category = services.categories.create("Equations", context.id, parent=top.id)

        assert category.id > 0
        assert category.contextid == context.id
        assert category.parent == top.id
        assert category.sortorder == 999
        assert category.info == ""

    def test_find_category_by_id(self, services):
        """Test finding a category by ID returns its question count."""
        context, top = create_context_with_top(services, "Algebra")
        created = services.categories.create("Equations", context.id, parent=top.id, info="Linear")
        services.categories.add_question(created.id, "Solve for x")

        found = services.categories.find(created.id)

        assert found.name == "Equations"
        assert found.info == "Linear"
        assert found.questioncount == 1

    def test_find_category_by_id_not_found(self, services):
        """Test finding a non-existent category returns None."""
        assert services.categories.find(9999) is None

    def test_find_by_context_excludes_top_category(self, services):
        """Test the top category is left out unless asked for."""
        context, top = create_context_with_top(services, "Algebra")
        create_categories(services, context.id, top.id, ["Equations"])

        names = [c.name for c in services.categories.find_by_context(context.id)]
        names_with_top = [
            c.name for c in services.categories.find_by_context(context.id, include_top=True)
        ]

        assert names == ["Equations"]
        assert names_with_top == ["top", "Equations"]

    def test_find_by_context_sorted_by_parent_sortorder_name(self, services):
        """Test rows come back ordered by (parent, sortorder, name)."""
        context, top = create_context_with_top(services, "Algebra")
        beta = services.categories.create("Beta", context.id, parent=top.id, sortorder=1)
        services.categories.create("Alpha", context.id, parent=top.id, sortorder=1)
        services.categories.create("Zeta", context.id, parent=top.id, sortorder=0)
        services.categories.create("Child", context.id, parent=beta.id, sortorder=0)

        categories = services.categories.find_by_context(context.id)

        assert [c.name for c in categories] == ["Zeta", "Alpha", "Beta", "Child"]
        keys = [(c.parent, c.sortorder, c.name) for c in categories]
        assert keys == sorted(keys)

    def test_find_by_context_only_returns_that_context(self, services):
        """Test categories of other contexts are not returned."""
        algebra, algebra_top = create_context_with_top(services, "Algebra")
        physics, physics_top = create_context_with_top(services, "Physics")
        create_categories(services, algebra.id, algebra_top.id, ["Equations"])
        create_categories(services, physics.id, physics_top.id, ["Optics", "Waves"])

        categories = services.categories.find_by_context(physics.id)

        assert {c.contextid for c in categories} == {physics.id}
        assert len(categories) == 2

    def test_find_by_context_empty(self, services):
        """Test a context with only a top category yields no rows."""
        context, _ = create_context_with_top(services, "Empty")

        assert services.categories.find_by_context(context.id) == []

    def test_find_by_context_custom_sort(self, services):
        """Test a descending name sort."""
        context, top = create_context_with_top(services, "Algebra")
        create_categories(services, context.id, top.id, ["A", "C", "B"])

        categories = services.categories.find_by_context(context.id, sort=("name DESC",))

        assert [c.name for c in categories] == ["C", "B", "A"]

    @pytest.mark.parametrize(
        "sort",
        [("questioncount",), ("name; DROP TABLE contexts",), ("name SIDEWAYS",), ()],
    )
    def test_find_by_context_rejects_invalid_sort(self, services, sort):
        """Test sort columns outside the allow-list raise ValueError."""
        context, _ = create_context_with_top(services, "Algebra")

        with pytest.raises(ValueError):
            services.categories.find_by_context(context.id, sort=sort)

    def test_question_count_ignores_hidden_and_subquestions(self, services):
        """Test hidden questions and sub-questions are not counted."""
        context, top = create_context_with_top(services, "Algebra")
        category = services.categories.create("Equations", context.id, parent=top.id)
        parent_question = services.categories.add_question(category.id, "Cloze")
        services.categories.add_question(category.id, "Cloze part", parent=parent_question)
        services.categories.add_question(category.id, "Old one", hidden=True)
        services.categories.add_question(category.id, "Another")

        found = services.categories.find_by_context(context.id)[0]

        assert found.questioncount == 2

    def test_create_category_with_special_characters(self, services):
        """Test names are stored as given."""
        context, top = create_context_with_top(services, "Algebra")
        category = services.categories.create("Sets & <Logic>", context.id, parent=top.id)

        assert services.categories.find(category.id).name == "Sets & <Logic>"
