"""react-scaffolding -- generate a Vite + React + TypeScript project with optional libraries."""

__version__ = "0.1.0"
