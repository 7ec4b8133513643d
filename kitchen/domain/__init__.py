"""Describes the kitchen. Centres around the `Chef`.

What is on show?

- Modules as namespaces: `people` hides nothing, it just groups a class and
  a factory.
- Private state: `business` keeps its secret ingredient to itself and only
  hands out `culinary`.
- Inheritance: a `Chef` is a `Person`. `speak` lives on `Person` but reads
  whichever instance calls it.
- Dependencies: the chef module never looks its collaborators up, they are
  handed over once at startup.

This whole example is pretty silly.
"""
