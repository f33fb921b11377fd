"""Rust backend: syntax tree -> Rust-flavoured source text."""
