# gui.py
import threading
import queue
from typing import Callable, Optional

import tkinter as tk
from tkinter import ttk, filedialog, messagebox

from clara.config import ShellConfig
from clara.engine import RenameEngine
from clara.errors import InvalidPathError
from clara.models import RunResult, ScanResult, UndoResult
from clara.utils import ensure_directory

MAX_LOG_LINES = 500  # keep widget light


class ButtonStates:
    """
    Rename is offered once a scan found matching files; Undo once a rename
    changed something, and only until that batch is undone.
    """

    def __init__(self):
        self.can_run = False
        self.can_undo = False
        self.last_operation_id: Optional[str] = None

    def scanned(self, scan: ScanResult):
        self.can_run = scan.matched > 0

    def renamed(self, result: RunResult, rescan: ScanResult):
        self.last_operation_id = result.operation_id
        self.can_undo = bool(result.renamed)
        self.can_run = rescan.matched > 0

    def undone(self):
        self.can_undo = False


class ClaraGUI(tk.Tk):
    def __init__(self, engine: Optional[RenameEngine] = None):
        super().__init__()
        self.title("CLARA")
        self.geometry("1040x700")

        self.engine = engine or RenameEngine()
        self.states = ButtonStates()

        # Engine runs on a worker thread; results come back through queues
        self.log_q: queue.Queue[str] = queue.Queue()
        self.done_q: queue.Queue[Callable[[], None]] = queue.Queue()
        self.worker_thread: Optional[threading.Thread] = None
        self._unsubscribe = self.engine.subscribe(self.log_q.put)

        self._build_ui()
        self._load_config()
        self.protocol("WM_DELETE_WINDOW", self.on_close)
        self._poll_queues()

    # ---------------- UI ----------------
    def _build_ui(self):
        frm = ttk.Frame(self, padding=10)
        frm.pack(fill="x")

        self.dir_var = tk.StringVar()
        self.ext_var = tk.StringVar()
        self.start_var = tk.StringVar(value="1")

        ttk.Label(frm, text="Folder:").grid(row=0, column=0, sticky="w")
        ttk.Entry(frm, textvariable=self.dir_var, width=70).grid(row=0, column=1, sticky="we", padx=5)
        ttk.Button(frm, text="Browse", command=self.on_browse).grid(row=0, column=2, padx=5)
        frm.grid_columnconfigure(1, weight=1)

        ttk.Label(frm, text="Extension (blank = any):").grid(row=1, column=0, sticky="w")
        ttk.Entry(frm, textvariable=self.ext_var, width=12).grid(row=1, column=1, sticky="w", padx=5, pady=2)
        ttk.Label(frm, text="Start number:").grid(row=2, column=0, sticky="w")
        ttk.Entry(frm, textvariable=self.start_var, width=12).grid(row=2, column=1, sticky="w", padx=5, pady=2)

        btns = ttk.Frame(frm)
        btns.grid(row=3, column=0, columnspan=3, sticky="w", pady=8)
        self.btn_scan = ttk.Button(btns, text="Scan", command=self.on_scan)
        self.btn_scan.pack(side="left")
        self.btn_run = ttk.Button(btns, text="Rename", command=self.on_run, state="disabled")
        self.btn_run.pack(side="left", padx=(8, 0))
        self.btn_undo = ttk.Button(btns, text="Undo last", command=self.on_undo, state="disabled")
        self.btn_undo.pack(side="left", padx=(8, 0))
        ttk.Button(btns, text="Clear Log", command=lambda: self._clear_text(self.txt_log))\
            .pack(side="left", padx=(8, 0))

        # Log box
        log_frame = ttk.Frame(self)
        log_frame.pack(fill="both", expand=True, padx=10, pady=(0, 10))
        self.txt_log = tk.Text(log_frame, height=20, wrap="none")
        self._attach_scrollbars(self.txt_log)
        self.txt_log.pack(fill="both", expand=True)

        # Status bar
        self.status_var = tk.StringVar(value="Ready")
        status = ttk.Label(self, textvariable=self.status_var, anchor="w", relief="sunken")
        status.pack(fill="x", side="bottom")

    def _attach_scrollbars(self, text_widget: tk.Text):
        yscroll = ttk.Scrollbar(text_widget.master, orient="vertical", command=text_widget.yview)
        xscroll = ttk.Scrollbar(text_widget.master, orient="horizontal", command=text_widget.xview)
        text_widget.configure(yscrollcommand=yscroll.set, xscrollcommand=xscroll.set)
        yscroll.pack(side="right", fill="y")
        xscroll.pack(side="bottom", fill="x")

    # ---------------- Helpers ----------------
    def _clear_text(self, widget: tk.Text):
        widget.delete("1.0", "end")

    def _trim_lines(self, widget: tk.Text, max_lines: int):
        lines = int(widget.index('end-1c').split('.')[0])
        if lines > max_lines:
            widget.delete("1.0", f"{lines - max_lines}.0")

    def set_status(self, msg: str):
        self.status_var.set(msg)

    def _poll_queues(self):
        while not self.log_q.empty():
            line = self.log_q.get_nowait()
            self.txt_log.insert("end", line + "\n")
            self.txt_log.see("end")
            self._trim_lines(self.txt_log, MAX_LOG_LINES)

        while not self.done_q.empty():
            self.done_q.get_nowait()()

        self.after(100, self._poll_queues)

    def _busy(self) -> bool:
        return bool(self.worker_thread and self.worker_thread.is_alive())

    def _start_worker(self, status: str, job: Callable[[], object], on_done: Callable[[object], None]):
        self.btn_scan.config(state="disabled")
        self.btn_run.config(state="disabled")
        self.btn_undo.config(state="disabled")
        self.set_status(status)

        def work():
            try:
                result = job()
            except Exception as e:
                msg = str(e)
                self.log_q.put(f"ERROR: {msg}")
                self.done_q.put(lambda: messagebox.showerror("Error", msg))
                result = None
            self.done_q.put(lambda: self._finish_worker(on_done, result))

        self.worker_thread = threading.Thread(target=work, daemon=True)
        self.worker_thread.start()

    def _finish_worker(self, on_done: Callable[[object], None], result):
        self.set_status("Ready")
        if result is not None:
            on_done(result)
        self.btn_scan.config(state="normal")
        self.btn_run.config(state="normal" if self.states.can_run else "disabled")
        self.btn_undo.config(state="normal" if self.states.can_undo else "disabled")

    def _selected_folder(self):
        try:
            return ensure_directory(self.dir_var.get())
        except InvalidPathError as e:
            messagebox.showerror("Error", f"Invalid folder: {e}")
            return None

    # ---------------- Actions ----------------
    def on_browse(self):
        path = filedialog.askdirectory()
        if path:
            self.dir_var.set(path)

    def on_scan(self):
        if self._busy():
            return
        folder = self._selected_folder()
        if folder is None:
            return
        ext = self.ext_var.get().strip() or None
        self._save_config()

        def done(scan: ScanResult):
            for item in scan.items:
                self.log_q.put(f"  {item.name}  ({item.date:%Y-%m-%d}, p.{item.page})")
            self.set_status(f"{scan.matched} of {scan.total} files match")
            self.states.scanned(scan)

        self._start_worker("Scanning...", lambda: self.engine.scan(folder, ext), done)

    def on_run(self):
        if self._busy():
            return
        folder = self._selected_folder()
        if folder is None:
            return
        ext = self.ext_var.get().strip() or None
        start = self.start_var.get().strip() or None
        if not messagebox.askyesno("Confirm", f"Rename the matching files in {folder}?"):
            return
        self._save_config()

        def job():
            result = self.engine.run(folder, ext, start)
            return result, self.engine.scan(folder, ext)

        def done(outcome):
            result, rescan = outcome
            self.set_status(f"Renamed {result.renamed} files")
            self.states.renamed(result, rescan)

        self._start_worker("Renaming...", job, done)

    def on_undo(self):
        if self._busy() or not self.states.can_undo:
            return
        last = self.engine.store.get(self.states.last_operation_id)
        if last is None:
            return
        if not messagebox.askyesno("Confirm", f"Undo {len(last.mappings)} renames in {last.directory}?"):
            return

        def done(result: UndoResult):
            self.set_status(f"Restored {result.undone} files, {len(result.errors)} errors")
            self.states.undone()
            if result.errors:
                messagebox.showwarning("Undo", "\n".join(result.errors[:20]))

        self._start_worker("Undoing...", lambda: self.engine.undo(last.id), done)

    def on_close(self):
        self._unsubscribe()
        self.destroy()

    # ---------------- Config ----------------
    def _load_config(self):
        cfg = ShellConfig.load()
        self.dir_var.set(cfg.directory)
        self.ext_var.set(cfg.extension)
        self.start_var.set(cfg.start_number)

    def _save_config(self):
        ShellConfig(
            directory=self.dir_var.get().strip(),
            extension=self.ext_var.get().strip(),
            start_number=self.start_var.get().strip(),
        ).save()


if __name__ == "__main__":
    app = ClaraGUI()
    app.mainloop()
