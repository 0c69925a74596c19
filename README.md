# patternkit

Small, self-contained examples of classic design patterns and the SOLID
principles. Each module holds the classes and functions of one example, and
most have a `demo()` function that prints what the pattern does.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running the demos

The `patternkit` command runs one or more demos by name:

```
patternkit adapter
patternkit bridge singleton
```

Run `patternkit` with no arguments to list the available demos:
`adapter`, `aggregation`, `bridge`, `builder`, `composite`, `decorator`,
`deep-copy`, `email-builder`, `facade`, `facets`, `factory`, `flyweight`,
`html-builder`, `lsp`, `neural`, `ocp`, `prototype`, `singleton`, `solid`,
`text-format`.

A few names are aliases: `builder` runs the functional builder demo,
`composite` the drawing demo, `flyweight` the user-name demo, `prototype`
the office demo and `solid` the dependency-inversion demo. The journal in
`patternkit.srp` has no demo.

## What is inside

Creational patterns
- `patternkit.email_builder`: `Email`, `EmailBuilder` (`from_`, `to`,
  `subject`, `body`) and `send_mail(action)`. Addresses without an `@` raise
  `ValueError` as soon as they are set; `send_mail` prints and returns the
  finished `Email`.
- `patternkit.facets`: `Person` and `PersonBuilder`, whose `lives()` and
  `works()` switch between `PersonAddressBuilder` (`at`, `in_`,
  `with_post_code`) and `PersonJobBuilder` (`at`, `as_a`, `earning`).
- `patternkit.function_builder`: `FunctionalPersonBuilder` records `called()`
  and `is_()` changes and applies them in `build()`; `introduce(action)`
  prints and returns an introduction.
- `patternkit.html_builder`: `HtmlBuilder.add_child()` (chainable) and
  `HtmlElement`, rendered as indented markup by `str()`.
- `patternkit.factory`: `new_person`, `new_employee_factory`,
  `EmployeeFactory.create`, `new_greeter` / `Greeter.say_hello`, and
  `new_employee_for_role(Role)`, which raises `ValueError` for an unknown role.
- `patternkit.deep_copy`: `Person.deep_copy()` and
  `Person.deep_copy_through_serialization()` (pickle).
- `patternkit.office`: `new_employee(Office, name, suite)` copies a
  per-office prototype; an unknown office raises `ValueError`.
- `patternkit.singleton`: `get_singleton_db()` creates the shared
  `CapitalsDatabase` once (thread-safe); `get_total_population_ex(db, cities)`
  accepts any `Database`, such as `DummyDatabase`.

Structural patterns
- `patternkit.adapter`: `vector_to_raster()` turns a `VectorImage` of
  horizontal and vertical `Line`s into `Point`s, caching points per line;
  `draw_points()` renders them as a grid of `*`.
- `patternkit.bridge`: `Circle` and `Square` drawn through `VectorRenderer`
  or `RasterRenderer`; `draw()` returns the description.
- `patternkit.geometric`: `GraphicObject` trees printed with `*` depth markers.
- `patternkit.neural`: `Neuron` and `NeuronLayer` both iterate over neurons,
  so `connect(left, right)` works on either.
- `patternkit.decorator`: `ColoredShape` and `TransparentShape` wrap any
  `Shape`.
- `patternkit.aggregation`: `Dragon` keeps a `Bird` and a `Lizard` at the
  same `age`.
- `patternkit.facade`: `Console.default()` hides a 200x150 `Buffer` and a
  `Viewport`; `character_at()` raises `IndexError` outside the buffer.
- `patternkit.text_format`: `FormattedText` (one flag per character) and
  `BetterFormattedText` (shared `TextRange`s).
- `patternkit.user_names`: `User` and `CompactUser`, whose name parts are
  indices into a shared table of at most 256 entries (`OverflowError` beyond).

SOLID
- `patternkit.srp`: `Journal` with `add_entry`, `remove_entry` and `save`.
- `patternkit.ocp`: `Filter` versus `BetterFilter` with `ColorSpecification`,
  `SizeSpecification` and `AndSpecification`.
- `patternkit.lsp`: `Rectangle`, `Square` and `use_it()`, which returns the
  expected and actual areas.
- `patternkit.dip`: `Relationships` and `Research.investigate()`.

## Example

```python
from patternkit.adapter import new_rectangle, vector_to_raster, draw_points

print(draw_points(vector_to_raster(new_rectangle(6, 4))))
```

```python
from patternkit.ocp import (
    AndSpecification, BetterFilter, Color, ColorSpecification,
    Product, Size, SizeSpecification,
)

products = [Product("Tree", Color.GREEN, Size.LARGE), Product("Apple", Color.GREEN, Size.SMALL)]
spec = AndSpecification(ColorSpecification(Color.GREEN), SizeSpecification(Size.LARGE))
print([p.name for p in BetterFilter().filter(products, spec)])  # ['Tree']
```