"""
Generic arithmetic over independently-installed numeric packages.
"""
