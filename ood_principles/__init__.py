"""OOD Principles - Root Package.

Small, independent examples of the five SOLID object-oriented design
principles, each built around narrow capability ports (abstract base classes)
and the classes that implement or consume them.

Key Components:
    - domain: One bounded context per principle
    - application: Demonstration service running every scenario
    - config: Configuration schemas and loading
    - cli: Command line entry point

Usage:
    >>> from ood_principles.domain.weapon import LaserBeam, RocketLauncher, WeaponsComposite
    >>> WeaponsComposite([LaserBeam(), RocketLauncher()]).shoot()
    ['Ziiiiiip!', 'Whoosh!']
"""

from ._package import PACKAGE_NAME, __version__

__package_name__ = PACKAGE_NAME
