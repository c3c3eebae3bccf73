"""Record GitHub mention pings and their acknowledgements.

The presence of this file makes ``pingbot`` a regular package so that its
namespace subpackages (``application``, ``domain``, ``infrastructure`` and
``interfaces``) resolve from here rather than from site-packages.
"""
