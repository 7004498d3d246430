"""Shared building blocks of the generation request pipeline."""
