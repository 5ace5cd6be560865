import logging

from rotorwash.schemas.theme import Entry, PageContext
from rotorwash.services.theme import render_fb_root, render_og_tags, render_paypal_button
from rotorwash.services.theme.facebook import auto_excerpt, og_tags


def _context(entry=None):
    return PageContext(
        site_name="Copter Labs",
        site_description="Web design & development",
        site_url="https://example.com",
        default_image="https://example.com/default.jpg",
        entry=entry,
    )


def test_fb_root_uses_configured_app_id():
    html = render_fb_root({"fb_app_id": "121970801204701"})

    assert '<div id="fb-root"></div>' in html
    assert "connect.facebook.net/en_US/all.js#xfbml=1\\u0026appId=121970801204701" in html


def test_fb_root_is_suppressed_without_app_id(caplog):
    with caplog.at_level(logging.WARNING):
        html = render_fb_root({"fb_app_id": "  "})

    assert html == ""
    assert "No Facebook App ID was supplied" in caplog.text


def test_fb_root_app_id_cannot_break_out_of_script():
    html = render_fb_root({"fb_app_id": '"</script><script>alert(1)</script>'})

    assert "</script><script>" not in html


def test_og_tags_describe_site_on_non_article_pages():
    tags = dict(og_tags(_context(), {"fb_admins": "633550295"}))

    assert tags["og:type"] == "website"
    assert tags["og:title"] == "Copter Labs"
    assert tags["og:url"] == "https://example.com"
    assert tags["og:description"] == "Web design & development"
    assert tags["fb:admins"] == "633550295"


def test_og_tags_describe_the_entry_on_single_pages():
    entry = Entry(
        id=7,
        title="Hello World",
        permalink="https://example.com/hello-world",
        content="<p>Welcome to <strong>WordPress</strong>.</p>",
    )
    tags = dict(og_tags(_context(entry), {"fb_admins": "1"}))

    assert tags["og:type"] == "article"
    assert tags["og:title"] == "Hello World"
    assert tags["og:url"] == "https://example.com/hello-world"
    assert tags["og:image"] == "https://example.com/default.jpg"
    assert tags["og:description"] == "Welcome to WordPress."


def test_og_tags_prefer_thumbnail_and_excerpt():
    entry = Entry(
        id=7,
        title="Hello",
        permalink="https://example.com/hello",
        excerpt="<em>Short</em> version ",
        content="Long version",
        thumbnail_url="https://example.com/thumb.jpg",
    )
    tags = dict(og_tags(_context(entry), {"fb_admins": "1"}))

    assert tags["og:image"] == "https://example.com/thumb.jpg"
    assert tags["og:description"] == "Short version"


def test_fb_admins_tag_is_omitted_when_not_configured(caplog):
    with caplog.at_level(logging.WARNING):
        html = render_og_tags(_context(), {})

    assert 'property="fb:admins"' not in html
    assert 'property="og:site_name" content="Copter Labs"' in html
    assert "No Facebook Admin IDs were supplied" in caplog.text


def test_og_tag_content_is_escaped():
    entry = Entry(id=1, title='"><script>x</script>', permalink="https://example.com/x")
    html = render_og_tags(_context(entry), {"fb_admins": "1"})

    assert "<script>" not in html
    assert "&amp;" in render_og_tags(_context(), {"fb_admins": "1"})


def test_auto_excerpt_truncates_long_content():
    content = " ".join(f"word{i}" for i in range(150))

    excerpt = auto_excerpt(content, length=100)

    assert excerpt.endswith("word99…")
    assert len(excerpt.split()) == 100


def test_paypal_button_uses_settings():
    blob = {
        "paypal_title": "Buy Me a Cup of Coffee",
        "paypal_addr": "donate@example.com",
        "paypal_item": "Coffee",
        "paypal_currency": "EUR",
    }
    html = render_paypal_button(blob, item_number=42)

    assert '<h3 class="rw-donate-title">Buy Me a Cup of Coffee</h3>' in html
    assert 'name="business" value="donate@example.com"' in html
    assert 'name="item_number" value="42"' in html
    assert 'name="currency_code" value="EUR"' in html
    assert 'action="https://www.paypal.com/cgi-bin/webscr"' in html


def test_paypal_button_defaults_currency():
    html = render_paypal_button({"paypal_addr": "donate@example.com", "paypal_currency": ""})

    assert 'name="currency_code" value="USD"' in html
    assert "rw-donate-title" not in html


def test_paypal_button_is_suppressed_without_email():
    assert render_paypal_button({"paypal_title": "Donate"}) == ""
