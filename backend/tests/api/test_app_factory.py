"""App Factory — store ownership and startup seeding."""

from blogposts.config import Settings
from blogposts.core.blog_post_store import BlogPostStore
from blogposts.main import create_app


def test_injected_store_is_used_as_is():
    store = BlogPostStore()
    app = create_app(store)
    assert app.state.store is store
    assert len(store) == 0


def test_default_store_is_seeded_with_one_post():
    app = create_app(settings=Settings(_env_file=None, seed_posts=True))
    posts = app.state.store.get()
    assert len(posts) == 1
    assert posts[0].title == "the alchemist"
    assert posts[0].author == "paulo coelho"
    assert posts[0].content == "poetry"


def test_seeding_can_be_disabled():
    app = create_app(settings=Settings(_env_file=None, seed_posts=False))
    assert len(app.state.store) == 0


def test_each_app_gets_its_own_store():
    settings = Settings(_env_file=None)
    assert create_app(settings=settings).state.store is not (
        create_app(settings=settings).state.store
    )


def test_run_serves_on_configured_port_without_uvicorn_access_log(
    monkeypatch,
):
    import blogposts.main as main_module

    calls = []
    monkeypatch.setattr(
        main_module.uvicorn, "run",
        lambda target, **kwargs: calls.append((target, kwargs)),
    )
    monkeypatch.setattr(
        main_module, "get_settings",
        lambda: Settings(_env_file=None, port=9123),
    )
    main_module.run()

    target, kwargs = calls[0]
    assert target == "blogposts.main:app"
    assert kwargs["port"] == 9123
    assert kwargs["access_log"] is False
