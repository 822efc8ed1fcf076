import pytest

from recordhooks import (
    DEFAULT_HOOKS,
    PRIVATE_HOOKS,
    PUBLIC_HOOKS,
    HookConfigurationError,
    Model,
    ModelConfigurationError,
    UnknownHookError,
    hook,
)
from recordhooks.hooks import is_private_hook


def test_every_model_declares_default_hooks():
    class Article(Model):
        pass

    assert Article._meta.hooks.names() == DEFAULT_HOOKS
    assert Article._meta.hooks.owner == "Article"
    assert set(PUBLIC_HOOKS).isdisjoint(PRIVATE_HOOKS)


def test_private_hooks_dispatch_like_public_ones():
    class Article(Model):
        pass

    Article.before_delete(block=lambda article: False)
    assert is_private_hook("before_delete")
    assert not is_private_hook("before_save")
    assert Article().before_delete() is False


def test_models_have_independent_registries():
    class Article(Model):
        pass

    class Comment(Model):
        pass

    Article.before_save(block=lambda article: False)
    assert Article.has_hooks("before_save")
    assert not Comment.has_hooks("before_save")
    assert Comment().before_save() is True


def test_after_initialize_runs_on_construction():
    class Article(Model):
        @hook("after_initialize")
        def set_defaults(self):
            self.status = getattr(self, "status", "draft")

    assert Article().status == "draft"
    assert Article(status="live").status == "live"


def test_constructor_rejects_hook_names():
    class Article(Model):
        pass

    with pytest.raises(TypeError):
        Article(before_save=True)


def test_hook_decorator_registers_in_definition_order():
    calls = []

    class Article(Model):
        @hook("before_save")
        def first(self):
            calls.append("first")

        @hook("before_save", tag="audit")
        def second(self):
            calls.append("second")

        @hook("before_save")
        @hook("after_save")
        def both(self):
            calls.append("both")

    assert [tag for tag, _ in Article._meta.hooks.entries("before_save")] == [
        "first",
        "audit",
        "both",
    ]
    assert Article().before_save() is True
    assert calls == ["first", "second", "both"]
    assert Article.has_hooks("after_save")


def test_define_hook_adds_custom_hook():
    class Document(Model):
        reviewed = False

        def publish(self):
            if not self.before_publish():
                return False
            self.published = True
            return True

    Document.define_hook("before_publish")
    Document.before_publish(block=lambda doc: doc.reviewed)

    assert Document().publish() is False
    assert Document(reviewed=True).publish() is True


def test_meta_hooks_declares_custom_hooks():
    class Document(Model):
        class Meta:
            hooks = ("before_archive", "after_archive")

        @hook("before_archive")
        def check(self):
            return False

    assert Document._meta.hooks.is_declared("after_archive")
    assert Document().before_archive() is False
    assert Document().after_archive() is True


def test_meta_hooks_must_be_iterable_of_names():
    with pytest.raises(ModelConfigurationError):

        class Document(Model):
            class Meta:
                hooks = "before_archive"


def test_define_hook_rejects_attribute_collision():
    class Document(Model):
        def archive(self):
            return True

    with pytest.raises(HookConfigurationError):
        Document.define_hook("archive")
    with pytest.raises(HookConfigurationError):
        Document.define_hook("run_hooks")


def test_redeclaring_resets_callbacks():
    class Document(Model):
        pass

    Document.before_save(block=lambda doc: False)
    Document.define_hook("before_save")
    assert not Document.has_hooks("before_save")
    assert Document().before_save() is True


def test_method_shadowing_a_hook_is_rejected():
    with pytest.raises(ModelConfigurationError):

        class Document(Model):
            def before_save(self):
                return True


def test_hook_blocks_visits_bodies():
    class Document(Model):
        pass

    body = lambda doc: None  # noqa: E731
    Document.after_save("t", body)
    visited = []
    Document.hook_blocks("after_save", visited.append)
    assert visited == [body]


def test_unknown_hook_lookup_raises():
    class Document(Model):
        pass

    with pytest.raises(UnknownHookError):
        Document.has_hooks("before_teleport")
    with pytest.raises(UnknownHookError):
        Document().run_hooks("before_teleport")


def test_subclass_inherits_snapshot_of_parent_hooks():
    calls = []

    class Base(Model):
        @hook("before_save")
        def check(self):
            calls.append(("check", type(self).__name__))

    class Child(Base):
        def check(self):
            calls.append(("override", type(self).__name__))

    Base.before_save("late", lambda inst: calls.append("late"))
    Child.after_save(block=lambda inst: False)

    assert Child().before_save() is True
    assert calls == [("override", "Child")]
    assert not Base.has_hooks("after_save")
    assert Child._meta.hooks is not Base._meta.hooks


def test_subclass_can_opt_out_of_inheriting_hooks():
    class Base(Model):
        class Meta:
            hooks = ("before_archive",)

        @hook("before_save")
        def check(self):
            return False

    class Fresh(Base):
        class Meta:
            inherit_hooks = False

    assert Fresh._meta.inherit_hooks is False
    assert Fresh._meta.hooks.is_declared("before_archive")
    assert not Fresh.has_hooks("before_save")
    assert Fresh().before_save() is True
    assert Base().before_save() is False


def test_repr_and_to_dict():
    class Article(Model):
        pass

    article = Article(title="Hello")
    assert article.to_dict() == {"title": "Hello"}
    assert repr(article) == "<Article title='Hello'>"


def test_hook_declared_on_parent_reaches_existing_subclasses():
    class Parent(Model):
        pass

    class Child(Parent):
        pass

    class GrandChild(Child):
        class Meta:
            inherit_hooks = False

    Parent.define_hook("before_archive")
    Child.before_archive(block=lambda inst: False)

    assert Parent().before_archive() is True
    assert Child().before_archive() is False
    assert GrandChild._meta.hooks.is_declared("before_archive")
    assert GrandChild().before_archive() is True


def test_redeclaring_on_parent_keeps_subclass_callbacks():
    class Parent(Model):
        class Meta:
            hooks = ("before_archive",)

    class Child(Parent):
        pass

    Child.before_archive(block=lambda inst: False)
    Parent.define_hook("before_archive")
    assert Child().before_archive() is False


def test_instance_attribute_named_run_hooks_does_not_break_triggers():
    class Job(Model):
        @hook("after_initialize")
        def mark(self):
            self.initialized = True

    Job.before_save(block=lambda job: False)

    job = Job(run_hooks=True)
    assert job.initialized is True
    assert job.run_hooks is True
    assert job.before_save() is False
