from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Mapping

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


def _write_tree(root: Path, files: Mapping[str, str | bytes]) -> None:
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")


@pytest.fixture()
def node_seed(tmp_path: Path) -> Path:
    """A cloned ``seed-nodejs-npm-lib`` checkout."""

    root = tmp_path / "seed-nodejs-npm-lib"
    manifest = {
        "name": "seed-nodejs-npm-lib",
        "version": "1.0.0",
        "scripts": {
            "test": "mocha",
            "rename": "node scripts/init/rename.js",
            "cleanup": "node scripts/init/cleanup.js",
        },
    }
    _write_tree(
        root,
        {
            "package.json": json.dumps(manifest, indent=2) + "\n",
            "package-lock.json": '{"name": "seed-nodejs-npm-lib"}\n',
            "README.md": "# Seed-Nodejs-Npm-Lib\n\nThe seed-nodejs-npm-lib starter.\n",
            "index.js": "class SeedNodejsNpmLib {}\nmodule.exports = SeedNodejsNpmLib;\n",
            "bin/cli.js": "#!/usr/bin/env node\nrequire('seed-nodejs-npm-lib');\n",
            "terraform/main.tf": (
                'resource "aws_sns_topic" "seed_nodejs_npm_lib" {\n'
                '  name = "seed-nodejs-npm-lib-topic"\n'
                "}\n"
                'resource "aws_lb_target_group" "tg" {\n'
                '  name = "seed-nodejs-npm-lib-tg"\n'
                "}\n"
            ),
            "scripts/init/rename.js": "// seed-nodejs-npm-lib bootstrap\n",
            "node_modules/dep/index.js": "// seed-nodejs-npm-lib\n",
            "assets/logo.png": b"\x89PNG\r\n seed-nodejs-npm-lib \x00\xff",
        },
    )
    return root


@pytest.fixture()
def dotnet_seed(tmp_path: Path) -> Path:
    """A cloned ``Seed-Dotnet-RestApi`` checkout."""

    root = tmp_path / "Seed-Dotnet-RestApi"
    project = "SeedDotnetRestapi"
    _write_tree(
        root,
        {
            f"{project}.sln": f'Project("{{FAE04EC0}}") = "{project}", "{project}\\{project}.csproj"\n',
            f"{project}/{project}.csproj": "<Project Sdk=\"Microsoft.NET.Sdk.Web\" />\n",
            f"{project}/Program.cs": f"namespace {project};\n// Seed-Dotnet-RestApi\n",
            f"{project}/terraform/main.tf": 'name = "seed-dotnet-restapi"\n',
            f"{project}.Tests/{project}.Tests.csproj": f'<ProjectReference Include="..\\{project}\\{project}.csproj" />\n',
            f"{project}.Tests/HealthTests.cs": f"namespace {project}.Tests;\n",
            f"{project}/bin/Debug/{project}.dll": b"MZ seed \x00",
        },
    )
    return root


@pytest.fixture()
def fargate_seed(tmp_path: Path) -> Path:
    """A ``Seed-Dotnet-RestApi-ECSFargate`` checkout with ``SeedDotnetRestapiEcsFargate`` folders."""

    root = tmp_path / "Seed-Dotnet-RestApi-ECSFargate"
    project = "SeedDotnetRestapiEcsFargate"
    _write_tree(
        root,
        {
            f"{project}/{project}.csproj": "<Project Sdk=\"Microsoft.NET.Sdk.Web\" />\n",
            f"{project}/Program.cs": (
                f"using {project}.Services;\n"
                f"using {project}.Middleware;\n\n"
                "public class Program {}\n"
            ),
            f"{project}/Services/HealthService.cs": f"namespace {project}.Services;\n",
            f"{project}/obj/project.assets.json": f'{{"project": "{project}"}}\n',
            f"{project}.Tests/{project}.Tests.csproj": (
                f'<ProjectReference Include="..\\{project}\\{project}.csproj" />\n'
            ),
            f"{project}.Tests/Controllers/HealthControllerTests.cs": (
                f"using {project}.Controllers;\n"
                f"namespace {project}.Tests.Controllers;\n"
            ),
        },
    )
    return root


@pytest.fixture(params=["my-new-service", "my-seed-service"])
def target_name(request) -> str:
    """New project names, including one that itself contains ``seed``."""

    return request.param


@pytest.fixture()
def write_tree():
    """Write a ``{relative path: content}`` mapping below a root directory."""

    return _write_tree
