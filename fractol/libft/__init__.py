"""Helpers for characters, strings, memory, linked lists, output, line reading and formatting."""