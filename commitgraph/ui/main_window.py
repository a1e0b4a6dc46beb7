"""
Main window for commitgraph - hosts the commit graph and owns selection
"""

import logging
from pathlib import Path

import pygit2
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from commitgraph.config.settings import Settings
from commitgraph.constants import (
    AUTHOR_COLUMN_WIDTH,
    DATE_COLUMN_WIDTH,
    MIN_GRAPH_WIDTH,
    SHA_COLUMN_WIDTH,
)
from commitgraph.git_backend.repository import GraphRepository
from commitgraph.graph.geometry import graph_width
from commitgraph.graph.types import BranchHead, Commit
from commitgraph.graph.viewport import ViewportConfig
from commitgraph.ui.commit_graph import CommitGraphView

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window showing one repository's history"""

    def __init__(
        self,
        repo: GraphRepository,
        settings: Settings | None = None,
        limit: int | None = None,
    ) -> None:
        super().__init__()
        self.repo = repo
        self.settings = settings or Settings()

        width, height = self.settings.get("ui.window_size", [1100, 700])
        self.resize(int(width), int(height))
        self.setWindowTitle(f"Commit Graph - {Path(self.repo.path).name}")

        self._page_size = self.settings.get_page_size()
        self._limit = limit or self._page_size
        self._commits: list[Commit] = []
        self._heads: list[BranchHead] = []
        self._has_more = False

        # Selection lives here, the graph only highlights it
        self._selected_commit_id: str | None = None

        self._setup_ui()
        self._setup_menus()
        self.refresh()

    def _setup_ui(self) -> None:
        """Setup header, graph and load-more button"""
        central = QWidget()
        self.setCentralWidget(central)

        layout = QVBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        layout.addWidget(self._build_header())

        config = ViewportConfig(
            row_height=self.settings.get_row_height(),
            buffer_rows=self.settings.get_buffer_rows(),
        )
        self.graph_view = CommitGraphView(config, self.settings.get_scroll_duration())
        self.graph_view.commit_activated.connect(self._on_commit_activated)
        self.graph_view.commit_opened.connect(self._on_commit_opened)
        layout.addWidget(self.graph_view, 1)

        self.load_more_button = QPushButton("Load more")
        self.load_more_button.clicked.connect(self.load_more)
        self.load_more_button.setVisible(False)
        layout.addWidget(self.load_more_button)

        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)

    def _build_header(self) -> QWidget:
        header = QWidget()
        header.setStyleSheet("""
            QWidget { background: #f0f0f0; border-bottom: 1px solid #ddd; }
            QLabel { color: #666; font-size: 11px; font-weight: bold; padding: 4px; }
        """)
        row = QHBoxLayout(header)
        row.setContentsMargins(0, 0, 0, 0)
        row.setSpacing(0)

        # Resized to the graph column on every refresh
        self.graph_header = QLabel("")
        self.graph_header.setFixedWidth(MIN_GRAPH_WIDTH)
        row.addWidget(self.graph_header)
        row.addWidget(QLabel("Description"), 1)
        for title, width in (
            ("Author", AUTHOR_COLUMN_WIDTH),
            ("Date", DATE_COLUMN_WIDTH),
            ("SHA", SHA_COLUMN_WIDTH),
        ):
            label = QLabel(title)
            label.setFixedWidth(width)
            row.addWidget(label)
        return header

    def _setup_menus(self) -> None:
        """Setup menu bar"""
        menubar = self.menuBar()

        file_menu = menubar.addMenu("&File")
        file_menu.addAction("&Refresh", self.refresh).setShortcut("F5")
        file_menu.addAction("Load &More", self.load_more).setShortcut("Ctrl+M")
        file_menu.addSeparator()
        file_menu.addAction("E&xit", self.close)

        view_menu = menubar.addMenu("&View")
        view_menu.addAction("Go to &HEAD", self.go_to_head).setShortcut("Ctrl+H")

    def refresh(self) -> None:
        """Reload commits and branch heads and rebuild the graph"""
        try:
            commits = self.repo.load_commits(self._limit)
            heads = self.repo.get_branch_heads(
                include_remotes=self.settings.get_show_remote_branches(),
                include_tags=self.settings.get_show_tags(),
            )
        except (pygit2.GitError, KeyError) as e:
            # Keep showing whatever was loaded before
            logger.error("Failed to read repository %s: %s", self.repo.path, e)
            self.status_bar.showMessage(f"Failed to read repository: {e}")
            return

        self._commits = commits
        self._heads = heads
        self._has_more = len(commits) >= self._limit
        self.load_more_button.setVisible(self._has_more)

        self.graph_view.set_data(self._commits, self._heads)
        self.graph_header.setFixedWidth(graph_width(self.graph_view.graph_layout.max_lane))
        self.graph_view.set_selected_commit(self._selected_commit_id)
        self.status_bar.showMessage(f"{len(commits)} commits, {len(heads)} branch heads")

    def load_more(self) -> None:
        """Extend the loaded window by one page"""
        if not self._has_more:
            return
        self._limit = len(self._commits) + self._page_size
        self.refresh()

    def select_commit(self, commit_id: str, scroll: bool = True) -> None:
        """Select a commit, highlight it and optionally bring it into view"""
        self._selected_commit_id = commit_id
        self.graph_view.set_selected_commit(commit_id)
        if scroll:
            self.graph_view.scroll_to_commit(commit_id)

        commit = self._find_commit(commit_id)
        if commit is not None:
            self.status_bar.showMessage(f"{commit.short_id}  {commit.summary}")

    def go_to_head(self) -> None:
        """Select and scroll to the checked-out commit"""
        for head in self._heads:
            if head.is_head:
                self.select_commit(head.commit_id)
                return
        self.status_bar.showMessage("HEAD is not in the loaded history")

    def _find_commit(self, commit_id: str) -> Commit | None:
        row = self.graph_view.graph_layout.row_of(commit_id)
        if row is None:
            return None
        return self._commits[row]

    def _on_commit_activated(self, commit_id: str) -> None:
        # Clicked rows are already on screen
        self.select_commit(commit_id, scroll=False)

    def _on_commit_opened(self, commit_id: str) -> None:
        """Show full details for a double-clicked commit"""
        commit = self._find_commit(commit_id)
        if commit is None:
            return
        author = commit.author
        if commit.author_email:
            author = f"{author} <{commit.author_email}>"
        QMessageBox.information(
            self,
            f"Commit {commit.short_id}",
            f"Commit: {commit.id}\n"
            f"Author: {author}\n"
            f"Date: {commit.date.strftime('%Y-%m-%d %H:%M:%S')}\n\n"
            f"{commit.message}",
        )
