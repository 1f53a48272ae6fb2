"""Shared pytest fixtures for the react-scaffolding test suite.

Provides reusable fixtures for:
- A temporary Vite ``react-ts`` project (``src/App.tsx`` / ``src/main.tsx``)
- A mocked ``NpmClient`` that never spawns processes
- The real template renderer and source injector
"""

from __future__ import annotations

import textwrap
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from react_scaffolding.config import Config, FeatureSelection
from react_scaffolding.injector import SourceInjector
from react_scaffolding.scaffolder.npm import NpmClient
from react_scaffolding.scaffolder.templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Vite default sources
# ---------------------------------------------------------------------------

VITE_MAIN_TSX = textwrap.dedent("""\
    import { StrictMode } from 'react'
    import { createRoot } from 'react-dom/client'
    import './index.css'
    import App from './App.tsx'

    createRoot(document.getElementById('root')!).render(
      <StrictMode>
        <App />
      </StrictMode>,
    )
""")

VITE_APP_TSX = textwrap.dedent("""\
    import { useState } from 'react'
    import reactLogo from './assets/react.svg'
    import viteLogo from '/vite.svg'
    import './App.css'

    function App() {
      const [count, setCount] = useState(0)

      return (
        <>
          <div>
            <a href="https://vite.dev" target="_blank">
              <img src={viteLogo} className="logo" alt="Vite logo" />
            </a>
          </div>
          <h1>Vite + React</h1>
          <div className="card">
            <button onClick={() => setCount((count) => count + 1)}>
              count is {count}
            </button>
          </div>
        </>
      )
    }

    export default App
""")


def write_vite_project(project_dir: Path) -> Path:
    """Lay out the files ``npm create vite -- --template react-ts`` produces."""
    src = project_dir / "src"
    src.mkdir(parents=True, exist_ok=True)
    (src / "main.tsx").write_text(VITE_MAIN_TSX, encoding="utf-8")
    (src / "App.tsx").write_text(VITE_APP_TSX, encoding="utf-8")
    (src / "index.css").write_text(":root {\n  font-family: system-ui;\n}\n", encoding="utf-8")
    (project_dir / "package.json").write_text('{"name": "%s"}\n' % project_dir.name, encoding="utf-8")
    return project_dir


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def vite_project(tmp_path: Path) -> Path:
    """Temporary Vite react-ts project named ``my-react-app``."""
    yield write_vite_project(tmp_path / "my-react-app")


@pytest.fixture
def main_file(vite_project: Path) -> Path:
    return vite_project / "src" / "main.tsx"


@pytest.fixture
def app_file(vite_project: Path) -> Path:
    return vite_project / "src" / "App.tsx"


# ---------------------------------------------------------------------------
# Collaborators
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_npm() -> MagicMock:
    """An NpmClient whose every command succeeds without running anything."""
    npm = MagicMock(spec=NpmClient)
    npm.run = AsyncMock(return_value=None)
    npm.install = AsyncMock(return_value=None)
    npm.exec = AsyncMock(return_value=None)
    npm.create_vite = AsyncMock(return_value=None)
    return npm


@pytest.fixture
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


@pytest.fixture
def injector() -> SourceInjector:
    return SourceInjector()


@pytest.fixture
def all_features() -> FeatureSelection:
    return FeatureSelection()


@pytest.fixture
def no_features() -> FeatureSelection:
    return FeatureSelection(**{key: False for key in FeatureSelection.model_fields})


@pytest.fixture
def config(tmp_path: Path) -> Config:
    """Config pointing at ``tmp_path/my-react-app``."""
    return Config(project_name="my-react-app", output_dir=tmp_path)
