"""CLI command: objtasks selector -- render a selector from its parts."""

from __future__ import annotations

import click

from objtasks.selector import SelectorBuilder


@click.command()
@click.option("--element", "tag", default=None, help="Element (tag) name")
@click.option("--id", "element_id", default=None, help="Element id")
@click.option("--class", "classes", multiple=True, help="Class name (repeatable)")
@click.option("--attr", "attributes", multiple=True, help='Attribute expression, e.g. href$=".png"')
@click.option("--pseudo-class", "pseudo_classes", multiple=True, help="Pseudo-class (repeatable)")
@click.option("--pseudo-element", default=None, help="Pseudo-element")
def selector(
    tag: str | None,
    element_id: str | None,
    classes: tuple[str, ...],
    attributes: tuple[str, ...],
    pseudo_classes: tuple[str, ...],
    pseudo_element: str | None,
) -> None:
    """Build a CSS selector and print it.

    Parts are applied in selector order: element, id, class, attribute,
    pseudo-class, pseudo-element.
    """
    builder = SelectorBuilder()
    if tag:
        builder.set_element(tag)
    if element_id:
        builder.set_id(element_id)
    for name in classes:
        builder.add_class(name)
    for expr in attributes:
        builder.add_attribute(expr)
    for name in pseudo_classes:
        builder.add_pseudo_class(name)
    if pseudo_element:
        builder.set_pseudo_element(pseudo_element)
    click.echo(builder.render())
