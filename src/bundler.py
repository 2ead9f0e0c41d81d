"""Build pipeline for the self-hosted SkyCMS Tailwind distribution."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from loguru import logger

from src.banners import render_banner
from src.config_loader import (
    get_minify_config,
    get_output_config,
    get_sources_config,
    load_config,
    resolve_project_root,
)
from src import documentation
from src.errors import MinificationError, MissingSourceError
from src.minifier import MinifyOptions, minify_js

BUNDLE_SEPARATOR = "\n\n"


@dataclass(frozen=True)
class SourceArtifact:
    name: str
    path: Path
    text: str


@dataclass
class OutputArtifact:
    name: str
    path: Path
    content: str
    size_bytes: int

    @property
    def size_kb(self) -> str:
        return f"{self.size_bytes / 1024:.2f}"


@dataclass
class BuildReport:
    runtime: OutputArtifact
    config: OutputArtifact
    bundle: OutputArtifact


@dataclass
class BuildResult:
    status: str
    output_dir: str
    runtime_path: str
    config_path: str
    bundle_path: str
    readme_path: str
    example_path: str
    runtime_bytes: int
    config_bytes: int
    bundle_bytes: int
    generated_at: str


class TailwindDistributionBuilder:
    """Assemble runtime, configuration and bundle files for SkyCMS pages."""

    def __init__(self, config: Dict[str, Any], clock: Optional[Callable[[], datetime]] = None):
        self.config = config
        self.root = resolve_project_root(config)
        sources = get_sources_config(config)
        outputs = get_output_config(config)

        self.source_names = {
            "runtime": str(sources.get("runtime", "tailwind.js")),
            "config": str(sources.get("config", "tailwind-config.js")),
        }
        self.output_dir_name = str(outputs.get("dir", "dist/skycms"))
        self.output_dir = self.root / self.output_dir_name
        self.output_names = {
            "runtime": str(outputs.get("runtime", "tailwind-runtime.js")),
            "config": str(outputs.get("config", "tailwind-config.js")),
            "bundle": str(outputs.get("bundle", "tailwind-bundle.js")),
            "readme": str(outputs.get("readme", "README.md")),
            "example": str(outputs.get("example", "example-template.html")),
        }
        self.minify_options = MinifyOptions.from_config(get_minify_config(config))
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self.generated_at = self._clock()

    def _source_path(self, kind: str) -> Path:
        return self.root / self.source_names[kind]

    def _output_path(self, kind: str) -> Path:
        return self.output_dir / self.output_names[kind]

    def _write(self, kind: str, content: str) -> OutputArtifact:
        path = self._output_path(kind)
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        # Size comes from disk after the handle is closed.
        return OutputArtifact(
            name=self.output_names[kind],
            path=path,
            content=content,
            size_bytes=path.stat().st_size,
        )

    def check_sources(self) -> None:
        for kind in ("runtime", "config"):
            path = self._source_path(kind)
            if not path.is_file():
                raise MissingSourceError(self.source_names[kind], path)

    def read_source(self, kind: str) -> SourceArtifact:
        path = self._source_path(kind)
        if not path.is_file():
            raise MissingSourceError(self.source_names[kind], path)
        # Line endings stay untranslated.
        with open(path, "r", encoding="utf-8", newline="") as f:
            text = f.read()
        return SourceArtifact(name=self.source_names[kind], path=path, text=text)

    def ensure_output_dir(self) -> None:
        if not self.output_dir.exists():
            self.output_dir.mkdir(parents=True, exist_ok=True)
            logger.info(f"Created output directory: {self.output_dir_name}")

    def assemble_runtime(self, source: SourceArtifact) -> OutputArtifact:
        artifact = self._write("runtime", render_banner("runtime", self.generated_at) + source.text)
        logger.info(f"Copied Tailwind runtime: {artifact.name} ({artifact.size_kb} KB)")
        return artifact

    def assemble_config(self, source: SourceArtifact) -> tuple[OutputArtifact, str]:
        try:
            minified = minify_js(source.text, self.minify_options)
        except MinificationError as exc:
            raise MinificationError(f"{source.name}: {exc}") from exc

        artifact = self._write("config", render_banner("config", self.generated_at) + minified)
        logger.info(f"Minified and copied configuration: {artifact.name} ({artifact.size_kb} KB)")
        return artifact, minified

    def assemble_bundle(self, runtime_text: str, minified_config_text: str) -> OutputArtifact:
        content = render_banner("bundle", self.generated_at) + runtime_text + BUNDLE_SEPARATOR + minified_config_text
        artifact = self._write("bundle", content)
        logger.info(f"Created minified bundle: {artifact.name} ({artifact.size_kb} KB)")
        return artifact

    def render_report(self, outputs: BuildReport) -> OutputArtifact:
        sizes = {
            "runtime": outputs.runtime.path.stat().st_size,
            "config": outputs.config.path.stat().st_size,
            "bundle": outputs.bundle.path.stat().st_size,
        }
        readme = documentation.render_readme(
            generated_at=self.generated_at,
            output_dir=self.output_dir_name,
            file_names=self.output_names,
            sizes=sizes,
        )
        artifact = self._write("readme", readme)
        logger.info(f"Created {artifact.name}")
        return artifact

    def render_example_template(self) -> OutputArtifact:
        html = documentation.render_example_template(output_dir=self.output_dir_name, file_names=self.output_names)
        artifact = self._write("example", html)
        logger.info(f"Created {artifact.name}")
        return artifact

    def build(self) -> BuildResult:
        logger.info("Building SkyCMS Tailwind Distribution...")
        self.check_sources()
        self.ensure_output_dir()

        runtime_source = self.read_source("runtime")
        runtime = self.assemble_runtime(runtime_source)

        config_source = self.read_source("config")
        config_artifact, minified = self.assemble_config(config_source)

        bundle = self.assemble_bundle(runtime_source.text, minified)

        report = BuildReport(runtime=runtime, config=config_artifact, bundle=bundle)
        readme = self.render_report(report)
        example = self.render_example_template()

        logger.info("Build complete")
        return BuildResult(
            status="completed",
            output_dir=str(self.output_dir),
            runtime_path=str(runtime.path),
            config_path=str(config_artifact.path),
            bundle_path=str(bundle.path),
            readme_path=str(readme.path),
            example_path=str(example.path),
            runtime_bytes=runtime.size_bytes,
            config_bytes=config_artifact.size_bytes,
            bundle_bytes=bundle.size_bytes,
            generated_at=self.generated_at.isoformat(),
        )


def run_build(
    config_path: Optional[str] = None,
    project_root: Optional[str] = None,
    config: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """Build the SkyCMS Tailwind distribution and return a summary."""
    if config is None:
        config = load_config(config_path)
    if project_root:
        config = {**config, "project_root": project_root}

    builder = TailwindDistributionBuilder(config)
    result = builder.build()
    return {
        "status": result.status,
        "output_dir": result.output_dir,
        "output_dir_name": builder.output_dir_name,
        "files": {
            "runtime": result.runtime_path,
            "config": result.config_path,
            "bundle": result.bundle_path,
            "readme": result.readme_path,
            "example": result.example_path,
        },
        "sizes": {
            "runtime": result.runtime_bytes,
            "config": result.config_bytes,
            "bundle": result.bundle_bytes,
        },
        "generated_at": result.generated_at,
    }
