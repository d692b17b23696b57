"""ASCII character, string and output helpers."""