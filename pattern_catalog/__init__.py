"""pattern-catalog.

An educational catalogue of classic object-oriented design patterns. Every
pattern is a short, self-contained demonstration built from toy car objects,
with a one-paragraph definition and a fixed, documented console output.

Layout
------

- ``pattern_catalog.creational``: Abstract Factory, Factory Method, Builder,
  Prototype, Singleton.
- ``pattern_catalog.structural``: Adapter, Bridge, Composite, Decorator,
  Facade, Flyweight, Proxy.
- ``pattern_catalog.behavioral``: Chain of Responsibility, Command, Iterator,
  Mediator, Memento, Observer, State, Strategy, Template Method, Visitor.

Each demo module registers itself with ``pattern_catalog.catalog`` through
the ``@pattern`` decorator. The catalogue can then:

1. List and look up patterns by key or name.
2. Run a demo and capture what it prints.
3. Verify every demo still prints exactly its documented output.
4. Render the README from the same code and output.

Demos are independent of each other; nothing is shared or persisted between
them.
"""

__version__ = "0.1.0"
