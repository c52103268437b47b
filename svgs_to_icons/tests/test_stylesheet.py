from svgs_to_icons.records import Accepted, IconRecord
from svgs_to_icons.stylesheet import (
    FALLBACK_ICON_SELECTOR,
    StylesheetAssembler,
    build_base_rule,
    build_icon_selector,
    referenced_rule,
)


def _accepted(class_name: str, file_name: str) -> Accepted:
    record = IconRecord(class_name=class_name, display_name=class_name.title(), file_name=file_name)
    return Accepted(record=record, svg_text="<svg/>", data_uri="data:image/svg+xml,%3csvg/%3e")


def test_selector_combines_prefix_and_postfix() -> None:
    assert build_icon_selector("ui-", "-icon") == '[class*="ui-"][class*="-icon"]'
    assert build_icon_selector("ui-", "") == '[class*="ui-"]'
    assert build_icon_selector("", "-icon") == '[class*="-icon"]'
    assert build_icon_selector("", "") == FALLBACK_ICON_SELECTOR


def test_base_rule_layout() -> None:
    assert build_base_rule('[class*="-icon"]') == (
        '[class*="-icon"] {\n'
        "\tmask-size: 100% 100%;\n"
        "\tbackground-color: currentColor;\n"
        "\tmask-repeat: no-repeat;\n"
        "\tmask-position: center;\n"
        "\theight: 1em;\n"
        "\twidth: 1em;\n"
        "\tdisplay: inline-block;\n"
        "}"
    )


def test_stylesheets_list_rules_in_arrival_order() -> None:
    assembler = StylesheetAssembler("", "-icon")
    assembler.add(_accepted("zeta-icon", "zeta.svg"))
    assembler.add(_accepted("alpha-icon", "alpha.svg"))

    embedded = assembler.embedded_css()
    referenced = assembler.referenced_css()

    assert len(assembler) == 2
    assert embedded.startswith(assembler.base_rule + "\n")
    assert embedded.endswith(
        '.zeta-icon { mask-image: url("data:image/svg+xml,%3csvg/%3e"); }\n'
        '.alpha-icon { mask-image: url("data:image/svg+xml,%3csvg/%3e"); }\n'
    )
    assert referenced.endswith(
        '.zeta-icon { mask-image: url("./icons/zeta.svg"); }\n'
        '.alpha-icon { mask-image: url("./icons/alpha.svg"); }\n'
    )


def test_empty_assembler_emits_only_the_base_rule() -> None:
    assembler = StylesheetAssembler()

    assert assembler.embedded_css() == assembler.base_rule + "\n"
    assert assembler.referenced_css() == assembler.base_rule + "\n"


def test_referenced_rule_escapes_quotes() -> None:
    assert referenced_rule("odd", './icons/a"b.svg') == '.odd { mask-image: url("./icons/a\\"b.svg"); }'
