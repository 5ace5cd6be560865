"""Jinja2 templates for the settings page and its fields."""

from jinja2 import DictLoader, Environment, StrictUndefined

DEFAULT_TEMPLATES = {
    "fields/text.html": (
        '<input id="{{ field.key }}" name="{{ option_name }}[{{ field.key }}]" '
        'size="{{ field.size }}" type="text" value="{{ value }}"'
        '{% if error %} aria-invalid="true" aria-describedby="{{ field.key }}-error"{% endif %} />'
        '{% if field.help_text %}\n<p class="description">{{ field.help_text }}</p>{% endif %}'
        '{% if error %}\n<span class="error-message" id="{{ field.key }}-error">{{ error.reason }}</span>{% endif %}'
    ),
    "fields/select.html": (
        '<select id="{{ field.key }}" name="{{ option_name }}[{{ field.key }}]"'
        '{% if error %} aria-invalid="true" aria-describedby="{{ field.key }}-error"{% endif %}>\n'
        '{% for option in field.options %}'
        '    <option value="{{ option.value }}"'
        '{% if option.title %} title="{{ option.title }}"{% endif %}'
        '{% if option.value == value %} selected="selected"{% endif %}>{{ option.label }}</option>\n'
        '{% endfor %}'
        '</select>'
        '{% if field.help_text %}\n<p class="description">{{ field.help_text }}</p>{% endif %}'
        '{% if error %}\n<span class="error-message" id="{{ field.key }}-error">{{ error.reason }}</span>{% endif %}'
    ),
    "settings_page.html": """<div class="wrap rw-settings">
<h2>{{ page_title }}</h2>
{% for notice in notices %}
<div class="{{ notice.css_class }}"><p>{{ notice.message }}</p></div>
{% endfor %}
<form method="post" action="{{ action }}">
{% for block in blocks %}
<h3 id="{{ block.section.id }}">{{ block.section.title }}</h3>
{% for paragraph in block.section.description %}
<p>{{ paragraph }}</p>
{% endfor %}
<table class="form-table">
{% for row in block.rows %}
<tr{% if row.error %} class="form-invalid"{% endif %}>
<th scope="row"><label for="{{ row.field.key }}">{{ row.field.label }}</label></th>
<td>{{ row.markup }}</td>
</tr>
{% endfor %}
</table>
{% endfor %}
<p class="submit"><input type="submit" class="button-primary" value="{{ submit_label }}" /></p>
</form>
</div>
""",
    "theme/fb_root.html": """<div id="fb-root"></div>
<script>(function(d, s, id) {
  var js, fjs = d.getElementsByTagName(s)[0];
  if (d.getElementById(id)) return;
  js = d.createElement(s); js.id = id;
  js.src = {{ sdk_url|tojson }};
  fjs.parentNode.insertBefore(js, fjs);
}(document, 'script', 'facebook-jssdk'));</script>
""",
    "theme/og_tags.html": """<!-- Facebook Open Graph tags -->
{% for property, content in tags %}
<meta property="{{ property }}" content="{{ content }}" />
{% endfor %}
""",
    "theme/paypal_button.html": """<form class="rw-donate" action="{{ action }}" method="post" target="_top">
{% if title %}
<h3 class="rw-donate-title">{{ title }}</h3>
{% endif %}
<input type="hidden" name="cmd" value="_donations" />
<input type="hidden" name="business" value="{{ business }}" />
<input type="hidden" name="item_name" value="{{ item_name }}" />
<input type="hidden" name="item_number" value="{{ item_number }}" />
<input type="hidden" name="currency_code" value="{{ currency }}" />
<input type="submit" name="submit" class="rw-donate-button" value="{{ button_label }}" />
</form>
""",
}


def build_environment() -> Environment:
    """Environment with autoescaping on for every template."""
    return Environment(
        loader=DictLoader(DEFAULT_TEMPLATES),
        autoescape=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
    )
