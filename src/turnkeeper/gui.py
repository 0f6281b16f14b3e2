"""Tkinter GUI for the speaking-turn tracker."""

from __future__ import annotations

import logging
import os
import threading
from datetime import datetime

from .config import Config, load_config
from .controller import SessionController
from .logging_utils import setup_logging
from .models import TurnkeeperError
from .renderer import format_clock, render_total_line
from .session_io import load_session, save_session
from .storage import build_export_basename, ensure_structure


def launch_gui() -> None:
    import tkinter as tk
    from tkinter import filedialog, messagebox, ttk

    root = tk.Tk()
    root.title("Turnkeeper")
    root.configure(bg="#0b0f14")

    style = ttk.Style(root)
    try:
        style.theme_use("clam")
    except tk.TclError:
        pass
    style.configure("TFrame", background="#0b0f14")
    style.configure("TLabel", background="#0b0f14", foreground="#d8e1ff")
    style.configure(
        "Neo.TLabelframe",
        background="#0b0f14",
        foreground="#8bd3ff",
        bordercolor="#0f1a2a",
        lightcolor="#0f1a2a",
        darkcolor="#0f1a2a",
    )
    style.configure(
        "Neo.TLabelframe.Label",
        background="#0b0f14",
        foreground="#8bd3ff",
    )
    style.configure(
        "TButton",
        background="#132033",
        foreground="#e6f1ff",
        borderwidth=1,
        relief="flat",
    )
    style.map(
        "TButton",
        background=[("active", "#1b2a44"), ("disabled", "#0f1a2a")],
        foreground=[("active", "#ffffff"), ("disabled", "#4b5b73")],
    )
    style.configure(
        "TEntry",
        fieldbackground="#111827",
        foreground="#e6f1ff",
        background="#111827",
        bordercolor="#1b2a44",
        lightcolor="#1b2a44",
        darkcolor="#1b2a44",
        relief="flat",
    )
    style.configure(
        "TCombobox",
        fieldbackground="#111827",
        foreground="#e6f1ff",
        background="#111827",
        bordercolor="#1b2a44",
        lightcolor="#1b2a44",
        darkcolor="#1b2a44",
    )
    style.map(
        "TCombobox",
        fieldbackground=[("readonly", "#111827")],
        foreground=[("readonly", "#e6f1ff")],
        selectbackground=[("readonly", "#132033")],
        selectforeground=[("readonly", "#e6f1ff")],
    )

    config_path = "turnkeeper_config.yml"
    config_error = None
    if os.path.exists(config_path):
        try:
            config = load_config(config_path)
        except Exception as exc:
            config_error = exc
            config = Config()
    else:
        config = Config()

    base_paths = ensure_structure(config.base_dir)
    logger, log_path = setup_logging(
        log_dir=base_paths["logs"],
        level=logging.DEBUG if config.debug_logging else logging.INFO,
    )
    if config_error is not None:
        logger.warning("Config load failed, using defaults: %s", config_error)

    def _thread_excepthook(args) -> None:
        logger.exception(
            "Thread exception",
            exc_info=(args.exc_type, args.exc_value, args.exc_traceback),
        )

    threading.excepthook = _thread_excepthook

    state_path = os.path.join(base_paths["sessions"], config.session.state_file)
    fresh_start = not os.path.exists(state_path)
    session = load_session(state_path)
    controller = SessionController(
        session, min_speech_seconds=config.session.min_speech_seconds
    )
    if fresh_start and config.session.default_categories:
        controller.set_categories_text("\n".join(config.session.default_categories))
    logger.info("Session loaded: %s (log: %s)", state_path, log_path)

    big_font = ("TkDefaultFont", config.display.font_size)
    style.configure("Big.TLabel", font=big_font)
    style.configure("Big.TButton", font=big_font)

    status_var = tk.StringVar(value="Ready")
    current_var = tk.StringVar()
    next_var = tk.StringVar()
    timer_var = tk.StringVar(value=format_clock(0))
    play_var = tk.StringVar()
    new_name_var = tk.StringVar(value=session.new_speaker_name)
    new_category_var = tk.StringVar(value=session.new_speaker_category)

    def _set_status(text: str) -> None:
        status_var.set(text)
        logger.info(text)

    def _guarded(action, label: str):
        def _run(*_args) -> None:
            try:
                action()
            except TurnkeeperError as exc:
                logger.warning("%s failed: %s", label, exc)
                status_var.set(str(exc))
            _refresh_all()

        return _run

    main = ttk.Frame(root, padding=10)
    main.pack(fill="both", expand=True)
    for col in range(3):
        main.columnconfigure(col, weight=1, uniform="cols")
    main.rowconfigure(0, weight=1)

    # Left column: queue and speakers.
    left = ttk.Frame(main)
    left.grid(row=0, column=0, sticky="nsew", padx=6)
    ttk.Label(left, textvariable=current_var).pack(anchor="w")
    ttk.Label(left, textvariable=next_var).pack(anchor="w")

    queue_frame = ttk.LabelFrame(left, text="Speaking order", style="Neo.TLabelframe")
    queue_frame.pack(fill="x", pady=6)
    queue_rows = ttk.Frame(queue_frame)
    queue_rows.pack(fill="x")

    speakers_frame = ttk.LabelFrame(
        left, text="Add someone to the speaking order", style="Neo.TLabelframe"
    )
    speakers_frame.pack(fill="x", pady=6)
    speaker_rows = ttk.Frame(speakers_frame)
    speaker_rows.pack(fill="x")

    add_frame = ttk.LabelFrame(left, text="Add a speaker", style="Neo.TLabelframe")
    add_frame.pack(fill="x", pady=6)
    name_entry = ttk.Entry(add_frame, textvariable=new_name_var, width=18)
    name_entry.pack(side="left", padx=2)
    category_combo = ttk.Combobox(
        add_frame, textvariable=new_category_var, state="readonly", width=12
    )
    category_combo.pack(side="left", padx=2)

    # Middle column: stopwatch and logged speeches.
    middle = ttk.Frame(main)
    middle.grid(row=0, column=1, sticky="nsew", padx=6)
    clock_row = ttk.Frame(middle)
    clock_row.pack()
    ttk.Label(clock_row, textvariable=timer_var, style="Big.TLabel").pack(side="left", padx=4)
    play_btn = ttk.Button(clock_row, textvariable=play_var, style="Big.TButton", width=3)
    play_btn.pack(side="left", padx=2)
    commit_btn = ttk.Button(clock_row, text="+", style="Big.TButton", width=3)
    commit_btn.pack(side="left", padx=2)

    speeches_canvas = tk.Canvas(middle, bg="#0b0f14", highlightthickness=0)
    speeches_scroll = ttk.Scrollbar(middle, orient="vertical", command=speeches_canvas.yview)
    speeches_canvas.configure(yscrollcommand=speeches_scroll.set)
    speeches_scroll.pack(side="right", fill="y")
    speeches_canvas.pack(side="left", fill="both", expand=True, pady=6)
    speech_rows = ttk.Frame(speeches_canvas)
    speeches_canvas.create_window((0, 0), window=speech_rows, anchor="nw")
    speech_rows.bind(
        "<Configure>",
        lambda _e: speeches_canvas.configure(scrollregion=speeches_canvas.bbox("all")),
    )

    # Right column: export, clear, categories and totals.
    right = ttk.Frame(main)
    right.grid(row=0, column=2, sticky="nsew", padx=6)
    actions = ttk.Frame(right)
    actions.pack(anchor="w")
    export_btn = ttk.Button(actions, text="Export")
    export_btn.pack(side="left", padx=2)
    clear_btn = ttk.Button(actions, text="Clear")
    clear_btn.pack(side="left", padx=2)

    ttk.Label(right, text="One category per line").pack(anchor="w", pady=(20, 2))
    categories_box = tk.Text(
        right,
        height=8,
        width=28,
        bg="#111827",
        fg="#e6f1ff",
        insertbackground="#e6f1ff",
        relief="flat",
    )
    categories_box.pack(fill="x")
    categories_box.insert("1.0", controller.categories_text())
    categories_box.edit_modified(False)

    totals_frame = ttk.LabelFrame(right, text="Total time per category", style="Neo.TLabelframe")
    totals_frame.pack(fill="x", pady=6)
    totals_rows = ttk.Frame(totals_frame)
    totals_rows.pack(fill="x")

    ttk.Label(root, textvariable=status_var, anchor="w").pack(fill="x", padx=10, pady=(0, 6))

    def _clear_children(frame) -> None:
        for child in frame.winfo_children():
            child.destroy()

    def _refresh_queue() -> None:
        current_var.set(f"Current turn: {controller.current_speaker().name}")
        next_var.set(f"Next turn: {controller.next_speaker().name}")
        _clear_children(queue_rows)
        for position, speaker in enumerate(controller.queued_speakers()):
            row = ttk.Frame(queue_rows)
            row.pack(fill="x")
            ttk.Button(
                row,
                text="x",
                width=2,
                command=_guarded(
                    lambda p=position: controller.remove_from_queue(p), "Queue removal"
                ),
            ).pack(side="left")
            ttk.Label(row, text=speaker.name).pack(side="left", padx=4)

    def _refresh_speakers() -> None:
        _clear_children(speaker_rows)
        for speaker in controller.speakers():
            row = ttk.Frame(speaker_rows)
            row.pack(fill="x")
            label = speaker.name
            if speaker.category:
                label = f"{speaker.name} ({speaker.category})"
            ttk.Label(row, text=label).pack(side="left", padx=4)
            ttk.Button(
                row,
                text="x",
                width=2,
                command=_guarded(
                    lambda sid=speaker.id: controller.delete_speaker(sid), "Speaker delete"
                ),
            ).pack(side="right")
            ttk.Button(
                row,
                text="+",
                width=2,
                command=_guarded(
                    lambda sid=speaker.id: controller.speaker_wants_to_speak(sid),
                    "Enqueue",
                ),
            ).pack(side="right")

    def _refresh_speeches() -> None:
        _clear_children(speech_rows)
        choices = controller.category_choices()
        speeches = controller.speeches()
        for position in reversed(range(len(speeches))):
            speech = speeches[position]
            row = ttk.Frame(speech_rows)
            row.pack(fill="x")
            ttk.Button(
                row,
                text="x",
                width=2,
                command=_guarded(
                    lambda p=position: controller.remove_speech(p), "Speech removal"
                ),
            ).pack(side="left")
            ttk.Label(row, text=format_clock(speech.duration)).pack(side="left", padx=4)
            combo = ttk.Combobox(row, values=choices, state="readonly", width=14)
            combo.set(speech.category)
            combo.pack(side="left", padx=2)
            combo.bind(
                "<<ComboboxSelected>>",
                lambda _e, p=position, c=combo: _guarded(
                    lambda: controller.reassign_speech_category(p, c.get()),
                    "Category change",
                )(),
            )

    def _refresh_categories() -> None:
        category_combo.configure(values=controller.category_choices())
        _clear_children(totals_rows)
        for total in controller.category_totals():
            ttk.Label(totals_rows, text=render_total_line(total)).pack(anchor="w")

    def _refresh_timer() -> None:
        timer_var.set(format_clock(controller.elapsed()))
        play_var.set("⏸" if controller.is_running else "⏵")
        commit_btn.configure(state="normal" if controller.can_commit() else "disabled")

    def _refresh_all() -> None:
        _refresh_queue()
        _refresh_speakers()
        _refresh_speeches()
        _refresh_categories()
        _refresh_timer()

    def _tick() -> None:
        _refresh_timer()
        root.after(config.display.refresh_ms, _tick)

    def _toggle_timer() -> None:
        controller.start_or_stop()
        _refresh_timer()

    def _commit() -> None:
        speech = controller.commit_speech()
        if speech is not None:
            _set_status(f"Speech logged: {format_clock(speech.duration)}")

    def _add_speaker() -> None:
        speaker = controller.add_speaker(new_name_var.get().strip(), new_category_var.get())
        _set_status(f"Speaker added: {speaker.name}")

    def _export() -> None:
        basename = build_export_basename("Speeches", datetime.now())
        path = filedialog.asksaveasfilename(
            title="Export speeches",
            defaultextension=".csv",
            initialdir=base_paths["exports"],
            initialfile=f"{basename}.csv",
            filetypes=[("CSV", "*.csv"), ("All files", "*.*")],
        )
        if not path:
            logger.debug("Export cancelled")
            return
        controller.export_to_file(path)
        _set_status(f"Exporting to {path}")

    def _clear() -> None:
        cleared = controller.clear_all(
            lambda: messagebox.askyesno(
                "Confirm clear", "Clear the timer and all logged speeches?"
            )
        )
        if cleared:
            _set_status("Speeches cleared")

    def _on_categories_changed(_event=None) -> None:
        if not categories_box.edit_modified():
            return
        controller.set_categories_text(categories_box.get("1.0", "end-1c"))
        categories_box.edit_modified(False)
        _refresh_categories()
        _refresh_speeches()

    def _on_new_name(*_args) -> None:
        controller.set_new_speaker(name=new_name_var.get())

    def _on_new_category(*_args) -> None:
        controller.set_new_speaker(category=new_category_var.get())

    def _on_close() -> None:
        try:
            save_session(state_path, controller.session)
            logger.info("Session saved: %s", state_path)
        except OSError:
            logger.exception("Session save failed")
        root.destroy()

    play_btn.configure(command=_toggle_timer)
    commit_btn.configure(command=_guarded(_commit, "Commit"))
    ttk.Button(add_frame, text="+", width=2, command=_guarded(_add_speaker, "Add speaker")).pack(
        side="left", padx=2
    )
    name_entry.bind("<Return>", _guarded(_add_speaker, "Add speaker"))
    export_btn.configure(command=_export)
    clear_btn.configure(command=_guarded(_clear, "Clear"))
    categories_box.bind("<<Modified>>", _on_categories_changed)
    new_name_var.trace_add("write", _on_new_name)
    new_category_var.trace_add("write", _on_new_category)
    root.protocol("WM_DELETE_WINDOW", _on_close)

    _refresh_all()
    _tick()
    root.mainloop()
