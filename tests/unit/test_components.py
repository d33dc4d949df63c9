"""Tests for the component tree."""

import pytest

from arbor.behaviors import AttributeModifier, Behavior
from arbor.components import (
    Component,
    Label,
    LifecycleState,
    MarkupContainer,
    Page,
    Renderable,
)
from arbor.core import (
    DuplicateComponentError,
    IllegalLifecycleStateError,
    UninitializedLifecycleError,
)


@pytest.fixture
def tree():
    """page > form > (name, email), page > footer"""
    page = Page()
    form = MarkupContainer("form")
    name = Label("name", "N")
    email = Label("email", "E")
    footer = Label("footer", "F")
    form.add(name, email)
    page.add(form, footer)
    return page, form, name, email, footer


@pytest.mark.unit
class TestIdentity:
    """Test ids and paths."""

    def test_paths(self, tree):
        page, form, name, _, footer = tree

        assert page.path == ""
        assert form.path == "form"
        assert name.path == "form:name"
        assert footer.path == "footer"

    def test_page_and_root(self, tree):
        page, form, name, _, _ = tree

        assert name.page is page
        assert name.root is page
        assert list(name.ancestors()) == [form, page]

    def test_detached_component_has_no_page(self):
        box = MarkupContainer("box")
        label = Label("a")
        box.add(label)

        assert label.page is None
        assert label.root is box
        assert label.path == "box:a"

    def test_relative_path(self, tree):
        page, form, name, _, _ = tree

        assert name.relative_path(page) == "form.name"
        assert name.relative_path(form) == "name"
        with pytest.raises(ValueError):
            form.relative_path(name)

    @pytest.mark.parametrize("bad_id", ["", "a:b"])
    def test_invalid_ids(self, bad_id):
        with pytest.raises(ValueError):
            Component(bad_id)

    def test_page_ids(self):
        first, second = Page(), Page()

        assert first.id.startswith("page_")
        assert first.id != second.id

    def test_renderable_protocol(self):
        assert isinstance(Label("a"), Renderable)
        assert isinstance(Page(), Renderable)


@pytest.mark.unit
class TestChildren:
    """Test container operations."""

    def test_duplicate_id(self, tree):
        page, form, *_ = tree

        with pytest.raises(DuplicateComponentError):
            form.add(Label("name"))
        # also a ValueError for callers that only know the builtin
        with pytest.raises(ValueError):
            page.add(Label("footer"))

    def test_lookup(self, tree):
        page, form, name, *_ = tree

        assert page.get("form:name") is name
        assert page["form"] is form
        assert page.get("form:missing") is None
        assert page.get("footer:child") is None
        with pytest.raises(KeyError):
            page["nope"]

    def test_contains_and_iteration(self, tree):
        page, form, name, email, footer = tree

        assert "form" in page
        assert name in form
        assert name not in page
        assert list(page) == [form, footer]
        assert len(form) == 2
        assert form.children == [name, email]

    def test_walk_is_depth_first(self, tree):
        page, form, name, email, footer = tree

        assert list(page.walk()) == [form, name, email, footer]

    def test_visit_children_filters_by_type(self, tree):
        page, form, *_ = tree
        seen = []

        page.visit_children(seen.append, Label)

        assert [c.id for c in seen] == ["name", "email", "footer"]

    def test_page_cannot_be_added(self):
        with pytest.raises(ValueError):
            MarkupContainer("box").add(Page())

    def test_cycles_rejected(self, tree):
        page, form, *_ = tree
        inner = MarkupContainer("inner")
        form.add(inner)

        with pytest.raises(ValueError):
            inner.add(form)
        with pytest.raises(ValueError):
            form.add(form)

    def test_moving_a_child(self, tree):
        page, form, name, *_ = tree
        other = MarkupContainer("other")
        page.add(other)

        other.add(name)

        assert name.parent is other
        assert "name" not in form
        assert name.path == "other:name"

    def test_remove_by_id(self, tree):
        page, form, name, *_ = tree

        removed = form.remove("name")

        assert removed is name
        assert name.parent is None
        assert name.state is LifecycleState.REMOVED
        with pytest.raises(ValueError):
            form.remove("name")

    def test_remove_foreign_component(self, tree):
        page, form, *_ = tree

        with pytest.raises(ValueError):
            form.remove(Label("name"))

    def test_remove_without_parent(self):
        with pytest.raises(IllegalLifecycleStateError):
            Label("a").detach()

    def test_detach(self, tree):
        page, form, name, email, _ = tree

        name.detach()

        assert name.parent is None
        assert form.children == [email]
        assert name.state is LifecycleState.REMOVED

    def test_remove_all(self, tree):
        page, form, name, email, _ = tree

        form.remove_all()

        assert len(form) == 0
        assert email.state is LifecycleState.REMOVED

    def test_replace_keeps_position(self, tree):
        page, form, name, email, _ = tree
        replacement = Label("name", "new")

        name.replace_with(replacement)

        assert form.children == [replacement, email]
        assert name.state is LifecycleState.REMOVED
        assert name.parent is None

    def test_replace_requires_matching_id(self, tree):
        _, _, name, *_ = tree

        with pytest.raises(ValueError):
            name.replace_with(Label("other"))

    def test_replace_missing(self, tree):
        page, *_ = tree

        with pytest.raises(ValueError):
            page.replace(Label("missing"))

    def test_add_or_replace(self, tree):
        page, form, name, *_ = tree
        replacement = Label("name")
        extra = Label("extra")

        form.add_or_replace(name, replacement, extra)

        assert form["name"] is replacement
        assert form["extra"] is extra


@pytest.mark.unit
class TestRemoval:
    """Test on_remove enforcement."""

    def test_missing_base_on_remove(self):
        class Leaky(Label):
            def on_remove(self):
                pass

        page = Page()
        page.add(Leaky("a"))

        with pytest.raises(UninitializedLifecycleError) as exc_info:
            page.remove("a")

        assert exc_info.value.hook == "on_remove"

    def test_subtree_removed(self, tree):
        page, form, name, email, _ = tree

        page.remove(form)

        assert [c.state for c in (form, name, email)] == [LifecycleState.REMOVED] * 3
        # the subtree stays intact below the removed node
        assert name.parent is form

    def test_reattach_before_initialize(self):
        page = Page()
        label = Label("a")
        page.add(label)
        page.remove(label)

        page.add(label)

        assert label.state is LifecycleState.CONSTRUCTED


@pytest.mark.unit
class TestVisibility:
    """Test visibility and enablement inheritance."""

    def test_hierarchy(self, tree):
        page, form, name, *_ = tree

        assert name.is_visible_in_hierarchy()
        form.visible = False
        assert name.is_visible()
        assert not name.is_visible_in_hierarchy()

        form.enabled = False
        assert name.is_enabled()
        assert not name.is_enabled_in_hierarchy()

    def test_override_is_visible(self, tree):
        class Hidden(Label):
            def is_visible(self):
                return False

        page, *_ = tree
        page.add(Hidden("h"))

        assert not page["h"].is_visible_in_hierarchy()


@pytest.mark.unit
class TestMarkupId:
    """Test markup id generation."""

    def test_generated_from_page_counter(self, tree):
        page, form, name, email, _ = tree

        assert name.markup_id == "name1"
        assert email.markup_id == "email2"
        assert name.markup_id == "name1"

    def test_explicit_markup_id(self, tree):
        _, _, name, *_ = tree
        name.markup_id = "custom"

        assert name.markup_id == "custom"

    def test_detached_component(self):
        with pytest.raises(IllegalLifecycleStateError):
            Label("a").markup_id


@pytest.mark.unit
class TestBehaviorBinding:
    """Test behavior attachment rules."""

    def test_stateful_behavior_binds_once(self):
        behavior = Behavior()
        first, second = Label("a"), Label("b")
        first.add_behavior(behavior)

        assert behavior.component is first
        with pytest.raises(IllegalLifecycleStateError):
            second.add_behavior(behavior)

    def test_stateless_behavior_can_be_shared(self):
        modifier = AttributeModifier.append("class", "x")
        first, second = Label("a"), Label("b")

        first.add_behavior(modifier)
        second.add_behavior(modifier)

        assert first.behaviors == (modifier,)
        assert second.behaviors == (modifier,)

    def test_remove_behavior_unbinds(self):
        behavior = Behavior()
        first, second = Label("a"), Label("b")
        first.add_behavior(behavior)

        first.remove_behavior(behavior)
        second.add_behavior(behavior)

        assert first.behaviors == ()
        assert behavior.component is second
        with pytest.raises(ValueError):
            first.remove_behavior(behavior)


@pytest.mark.unit
def test_get_string_requires_application(tree):
    _, _, name, *_ = tree

    with pytest.raises(IllegalLifecycleStateError):
        name.get_string("key")


@pytest.mark.unit
def test_locale_comes_from_page():
    page = Page(locale="de_DE")
    label = Label("a")
    page.add(label)

    assert label.get_locale() == "de_DE"
    assert Label("b").get_locale() is None
