"""Small helpers for characters, numbers, byte buffers, strings, linked lists and formatting."""