"""Application layer: Qt-free state and services."""
