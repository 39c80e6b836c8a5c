#!/usr/bin/env python3
"""
Upload Service Module

Creates one gist per file. Each upload runs on its own thread and reports
back through a queue sized to the number of files, so no thread ever blocks
on reporting. The caller drains exactly one outcome per file, in whatever
order they finish.
"""

import logging
import queue
import threading
import time
from dataclasses import dataclass
from typing import List, Optional

from tqdm import tqdm

from ..config import UploadOptions
from ..exceptions import UploadCancelledError
from ..local_file import LocalFile, DRY_RUN, FAILED
from ..utils import print_dynamic_table, print_file_count_summary, BLUE, END

logger = logging.getLogger("gist_uploader")


@dataclass
class UploadOutcome:
    """Result of one upload attempt."""

    file: LocalFile
    error: Optional[BaseException] = None
    url: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None


class UploadService:
    """Service for dispatching gist uploads."""

    def __init__(self, client, options: UploadOptions):
        """
        Initialize the upload service.

        Args:
            client: GistClient instance
            options: Options for this run
        """
        self.client = client
        self.options = options

    def dispatch(
        self,
        files: List[LocalFile],
        cancel_event: Optional[threading.Event] = None,
    ) -> List[UploadOutcome]:
        """
        Upload every file concurrently, or only describe them on a dry run.

        Failures are logged and returned; they never stop other uploads.

        Args:
            files: Validated files to upload
            cancel_event: Set to stop uploads that have not started yet

        Returns:
            One outcome per file in completion order (empty on a dry run)
        """
        if self.options.dry_run:
            self._describe(files)
            return []

        if not files:
            return []

        if cancel_event is None:
            cancel_event = threading.Event()

        start_time = time.time()
        completed = queue.Queue(maxsize=len(files))

        for local_file in files:
            worker = threading.Thread(
                target=self._upload_one,
                args=(local_file, completed, cancel_event),
                name=f"gist-upload-{local_file.file_path}",
                daemon=True,
            )
            worker.start()

        outcomes = self._collect(completed, len(files), cancel_event)

        if not self.options.quiet:
            succeeded = sum(1 for outcome in outcomes if outcome.succeeded)
            print_file_count_summary(
                succeeded,
                len(outcomes) - succeeded,
                "uploaded",
                elapsed=time.time() - start_time,
            )

        return outcomes

    def _upload_one(
        self,
        local_file: LocalFile,
        completed: queue.Queue,
        cancel_event: threading.Event,
    ) -> None:
        """Thread body: upload one file and put exactly one outcome."""
        if cancel_event.is_set():
            local_file.status = FAILED
            completed.put(UploadOutcome(local_file, error=UploadCancelledError("upload cancelled")))
            return

        try:
            url = local_file.upload(
                self.client,
                public=self.options.public,
                description=self.options.description,
            )
        except Exception as e:
            completed.put(UploadOutcome(local_file, error=e))
            return

        completed.put(UploadOutcome(local_file, url=url))

    def _collect(
        self,
        completed: queue.Queue,
        expected: int,
        cancel_event: threading.Event,
    ) -> List[UploadOutcome]:
        outcomes = []
        with tqdm(
            total=expected,
            unit="gist",
            desc="Creating gists",
            disable=self.options.quiet,
        ) as pbar:
            try:
                for _ in range(expected):
                    outcome = completed.get()
                    outcomes.append(outcome)
                    pbar.update(1)
                    self._report(outcome)
            except KeyboardInterrupt:
                cancel_event.set()
                logger.warning(
                    f"Upload cancelled by user, {expected - len(outcomes)} uploads not collected"
                )
                raise
        return outcomes

    def _report(self, outcome: UploadOutcome) -> None:
        """Log a single outcome."""
        name = outcome.file.name()
        if name is None:
            logger.error(f"Error: could not determine a file name for {outcome.file.file_path!r}")
            name = outcome.file.file_path

        if outcome.succeeded:
            logger.info(f"Created gist for {name}: {BLUE}{outcome.url}{END}")
        else:
            logger.error(f"Error: create gist failed ({name}): {outcome.error}")

    def _describe(self, files: List[LocalFile]) -> None:
        """Print the files a real run would upload."""
        for local_file in files:
            local_file.status = DRY_RUN

        visibility = "public" if self.options.public else "secret"
        rows = [dict(local_file.describe(), visibility=visibility) for local_file in files]
        headers = {
            "name": "File Name",
            "path": "Path",
            "size": "Size",
            "visibility": "Visibility",
        }
        print(f"Would create {len(files)} gist{'s' if len(files) != 1 else ''}:")
        print_dynamic_table(rows, headers, max_path_length=60)
