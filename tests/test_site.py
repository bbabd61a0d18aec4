from pathlib import Path

import pytest
import yaml
from bs4 import BeautifulSoup
from pydantic import ValidationError

from topus.errors import MalformedBuilderInput
from topus.models import ElementSpec, PageSpec, SiteConfig
from topus.site import build_site, load_site_config, page_document

SITE = {
    "pages": [
        {"output": "index.html"},
        {
            "output": "about/index.html",
            "title": "About",
            "customElements": ["pop-up-info"],
            "head": [{"element": "link", "attributes": [{"rel": "stylesheet"}, {"href": "site.css"}]}],
            "body": [
                {
                    "element": "main",
                    "attributes": ["hidden", {"data-page": "about"}],
                    "children": [
                        {"element": "h1", "children": [{"text": "About"}]},
                        "hr",
                        {"comment": "footer"},
                        {"define": "x-note"},
                    ],
                }
            ],
        },
    ]
}


def _write_site(tmp_path: Path, payload) -> Path:
    path = tmp_path / "site.yaml"
    path.write_text(yaml.safe_dump(payload), encoding="utf-8")
    return path


def test_load_and_build_site(tmp_path: Path):
    config = load_site_config(_write_site(tmp_path, SITE))
    written = build_site(config, tmp_path / "out")

    assert written == [tmp_path / "out" / "index.html", tmp_path / "out" / "about" / "index.html"]
    assert (tmp_path / "out" / "index.html").read_text(encoding="utf-8").endswith(
        "<title>Document</title></head><body></body></html>"
    )

    about = (tmp_path / "out" / "about" / "index.html").read_text(encoding="utf-8")
    assert (
        '<main hidden data-page="about"><h1>About</h1><hr><!--footer--><script>'
        in about
    )
    soup = BeautifulSoup(about, "html.parser")
    assert soup.title.string == "About"
    scripts = [script.get_text() for script in soup.find_all("script")]
    assert any("customElements.define('pop-up-info', PopUpInfo);" in body for body in scripts)
    assert any("customElements.define('x-note', XNote);" in body for body in scripts)


def test_head_order_is_extras_then_custom_elements():
    page = PageSpec.model_validate(
        {
            "output": "x.html",
            "customElements": ["my-custom"],
            "head": [{"element": "link", "attributes": [{"rel": "icon"}]}],
        }
    )
    rendered = page_document(page).render()
    assert '<title>Document</title><link rel="icon"><script>' in rendered


def test_populate_by_field_name():
    page = PageSpec(output="x.html", custom_elements=["my-custom"])
    assert page.custom_elements == ["my-custom"]


def test_element_spec_to_node():
    spec = ElementSpec.model_validate(
        {"element": "meta", "attributes": [{"http-equiv": "X-UA-Compatible"}, {"content": "IE=edge"}]}
    )
    assert spec.to_node().render() == '<meta http-equiv="X-UA-Compatible" content="IE=edge">'


def test_attribute_mapping_needs_one_key():
    with pytest.raises(ValidationError):
        ElementSpec.model_validate({"element": "a", "attributes": [{"href": "/", "id": "x"}]})


def test_unknown_node_shape_is_rejected():
    with pytest.raises(ValidationError):
        SiteConfig.model_validate({"pages": [{"output": "x.html", "body": [{"paragraph": "x"}]}]})


def test_malformed_attribute_name_surfaces_builder_error():
    page = PageSpec.model_validate(
        {"output": "x.html", "body": [{"element": "a", "attributes": ["not valid"]}]}
    )
    with pytest.raises(MalformedBuilderInput):
        page_document(page)


def test_missing_config(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_site_config(tmp_path / "missing.yaml")


def test_config_must_be_mapping(tmp_path: Path):
    with pytest.raises(ValueError):
        load_site_config(_write_site(tmp_path, ["not", "a", "mapping"]))


@pytest.mark.parametrize(
    "payload",
    [
        {"pages": [{"output": "x.html", "custom_element": ["my-custom"]}]},
        {"pages": [], "page": [{"output": "x.html"}]},
    ],
)
def test_unknown_config_keys_are_rejected(payload):
    with pytest.raises(ValidationError):
        SiteConfig.model_validate(payload)
