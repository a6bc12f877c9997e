"""
UI module for Wordle Filter.

tkinter front end:
- Command entry (Enter applies the line, e.g. "1+c 3-a -xyz")
- Active filter description
- Match list, colored by frequency (rare words greyed out)
- RESET button to start a new puzzle
"""

import tkinter as tk

from session import HELP_TEXT, STYLE_RARE, STYLE_SINGLE, Session


# Color scheme
COLORS = {
    "bg_dark": "#0F172A",            # Main background
    "bg_frame": "#1E293B",           # Panels
    "text": "#E5E7EB",               # Main text / common words
    "muted": "#9CA3AF",              # Hints
    "rare": "#475569",               # Rare words
    "single": "#22C55E",             # Only one match left
    "error": "#F87171",              # Rejected input / no matches
}

FONT = "Helvetica Neue"


class WordleFilterApp:
    """
    Wordle Filter window.

    Layout:
    - Top: Command entry and status line
    - Middle: Match list
    - Bottom: Filter description and RESET button
    """

    def __init__(self, master: tk.Tk, session: Session):
        """Initialize application."""
        self.master = master
        self.session = session
        self.master.title("Wordle Filter")
        self.master.geometry("420x640")
        self.master.configure(bg=COLORS["bg_dark"])
        self.master.minsize(360, 480)

        self.command_var = tk.StringVar()
        self.status_var = tk.StringVar(value=HELP_TEXT)

        self._create_widgets()
        self._refresh()

    def _create_widgets(self):
        """Create all UI widgets."""
        main_frame = tk.Frame(self.master, bg=COLORS["bg_dark"])
        main_frame.pack(fill=tk.BOTH, expand=True, padx=20, pady=20)

        self._create_input_area(main_frame)
        self._create_match_list(main_frame)
        self._create_controls(main_frame)

    def _create_input_area(self, parent):
        entry = tk.Entry(
            parent,
            textvariable=self.command_var,
            font=(FONT, 16),
            bg=COLORS["bg_frame"],
            fg=COLORS["text"],
            insertbackground=COLORS["text"],
            relief=tk.FLAT
        )
        entry.pack(fill=tk.X, pady=(0, 5))
        entry.bind("<Return>", self._on_submit)
        entry.focus_set()

        self.status_label = tk.Label(
            parent,
            textvariable=self.status_var,
            font=(FONT, 10),
            bg=COLORS["bg_dark"],
            fg=COLORS["muted"],
            wraplength=360,
            justify=tk.LEFT
        )
        self.status_label.pack(fill=tk.X, pady=(0, 10))

    def _create_match_list(self, parent):
        frame = tk.Frame(parent, bg=COLORS["bg_frame"], relief=tk.RAISED, bd=2)
        frame.pack(fill=tk.BOTH, expand=True, pady=(0, 10))

        self.header_label = tk.Label(
            frame,
            text="",
            font=(FONT, 14, "bold"),
            bg=COLORS["bg_frame"],
            fg=COLORS["text"]
        )
        self.header_label.pack(pady=(5, 5))

        self.match_list = tk.Listbox(
            frame,
            font=(FONT, 16, "bold"),
            bg=COLORS["bg_frame"],
            fg=COLORS["text"],
            relief=tk.FLAT,
            highlightthickness=0,
            activestyle="none"
        )
        self.match_list.pack(fill=tk.BOTH, expand=True, padx=10, pady=(0, 10))

    def _create_controls(self, parent):
        self.filter_label = tk.Label(
            parent,
            text="",
            font=(FONT, 11),
            bg=COLORS["bg_dark"],
            fg=COLORS["muted"],
            justify=tk.LEFT,
            anchor="w"
        )
        self.filter_label.pack(fill=tk.X, pady=(0, 10))

        reset_btn = tk.Button(
            parent,
            text="RESET",
            font=(FONT, 14, "bold"),
            bg=COLORS["bg_frame"],
            fg=COLORS["text"],
            width=12,
            command=self._reset,
            cursor="hand2"
        )
        reset_btn.pack()

    # === Event Handlers ===

    def _on_submit(self, event=None):
        message = self.session.handle(self.command_var.get())
        if self.session.finished:
            self.master.destroy()
            return

        if self.session.last_error:
            self.status_label.config(fg=COLORS["error"])
        else:
            self.status_label.config(fg=COLORS["muted"])
            self.command_var.set("")
        self.status_var.set(message or HELP_TEXT)
        self._refresh()

    def _reset(self):
        self.session.reset()
        self.status_label.config(fg=COLORS["muted"])
        self.status_var.set(HELP_TEXT)
        self._refresh()

    # === UI Update ===

    def _refresh(self):
        """Redraw matches and filter description from the session view."""
        view = self.session.view()
        self.match_list.delete(0, tk.END)

        if view.suggestions:
            self.header_label.config(text="Good starting words", fg=COLORS["text"])
            for word in view.suggestions:
                self.match_list.insert(tk.END, word.upper())
        elif not view.entries:
            self.header_label.config(text="No matches", fg=COLORS["error"])
        else:
            header = f"Matches ({len(view.entries)} of {view.total})"
            self.header_label.config(text=header, fg=COLORS["text"])
            for entry, style in view.entries:
                self.match_list.insert(tk.END, entry.word.upper())
                if style == STYLE_SINGLE:
                    color = COLORS["single"]
                elif style == STYLE_RARE:
                    color = COLORS["rare"]
                else:
                    color = COLORS["text"]
                self.match_list.itemconfig(tk.END, fg=color)

        self.filter_label.config(text="\n".join(view.description))
