"""Adapters exposing registered tools through other interfaces."""
