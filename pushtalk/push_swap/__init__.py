"""Sorting integers with two stacks and a fixed set of operations."""