"""Contributor branch workflow helpers: sync, squash, push, test and lint."""
