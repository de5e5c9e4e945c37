"""Tk GUI for the NPS value calculator."""
from __future__ import annotations

import tkinter as tk
from tkinter import filedialog, messagebox, scrolledtext, ttk
from typing import Dict, Optional

from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg
from matplotlib.figure import Figure

from ..definitions import (
    CASE_STUDY_TEXT,
    CASE_STUDY_TITLE,
    COMPONENT_LABELS,
    INPUT_LABELS,
    RESULT_GROUPS,
    SECTIONS,
    get_definition,
)
from ..formatting import format_currency, format_number
from ..model import COMPONENT_FIELDS, ValueModel
from ..parsing import from_display, parse_estimation_text, to_display
from ..reporting import export_results_csv

REVENUE_COLOR = "#1E88E5"
COST_COLOR = "#43A047"


class _Tooltip:
    """Hover popup showing a field's description and estimation guidance."""

    def __init__(self, widget: tk.Widget, field: str) -> None:
        self.widget = widget
        self.field = field
        self._win: Optional[tk.Toplevel] = None
        widget.bind("<Enter>", self.show)
        widget.bind("<Leave>", self.hide)

    def show(self, event: Optional[object] = None) -> None:
        if self._win is not None:
            return
        definition = get_definition(self.field)
        x = self.widget.winfo_rootx() + 20
        y = self.widget.winfo_rooty() + 20
        self._win = win = tk.Toplevel(self.widget)
        win.wm_overrideredirect(True)
        win.wm_geometry(f"+{x}+{y}")
        frm = tk.Frame(win, background="#ffffff", borderwidth=1, relief="solid", padx=8, pady=6)
        frm.pack()
        tk.Label(
            frm,
            text=definition["description"],
            font=("TkDefaultFont", 9, "bold"),
            background="#ffffff",
            justify="left",
            wraplength=280,
        ).pack(anchor="w", pady=(0, 6))
        lines = parse_estimation_text(definition["estimation"])
        if len(lines) > 1:
            # First segment is the lead-in ("Calculate from:"), the rest are bullets.
            text = lines[0] + "\n" + "\n".join(f"• {line}" for line in lines[1:])
        else:
            text = "\n".join(lines)
        tk.Label(
            frm, text=text, background="#ffffff", justify="left", wraplength=280
        ).pack(anchor="w")

    def hide(self, event: Optional[object] = None) -> None:
        if self._win is not None:
            self._win.destroy()
            self._win = None


class App(tk.Tk):
    def __init__(self, model: Optional[ValueModel] = None) -> None:
        super().__init__()
        self.title("Airline NPS Value Calculator")
        self.geometry("1100x900")
        self.model = model or ValueModel()
        self._input_vars: Dict[str, tk.StringVar] = {}
        self._result_vars: Dict[str, tk.StringVar] = {}
        self._tooltips = []
        self._loading = False

        self._build_menu()
        self._build_banner()
        self._build_inputs()
        self._build_results()
        self._build_chart()
        self._load_inputs()
        self._refresh()

    # ---------- Menu / Help ----------
    def _build_menu(self) -> None:
        menubar = tk.Menu(self)
        filemenu = tk.Menu(menubar, tearoff=0)
        filemenu.add_command(label="Export Results CSV…", command=self._export_results_csv)
        filemenu.add_command(label="Reset to Case Study", command=self._reset)
        filemenu.add_separator()
        filemenu.add_command(label="Quit", command=self.destroy)
        menubar.add_cascade(label="File", menu=filemenu)
        helpmenu = tk.Menu(menubar, tearoff=0)
        helpmenu.add_command(label="How it works", command=self._open_help)
        menubar.add_cascade(label="Help", menu=helpmenu)
        self.config(menu=menubar)

    def _open_help(self) -> None:
        win = tk.Toplevel(self)
        win.title("NPS Value Calculator — How it works")
        win.geometry("760x560")
        txt = scrolledtext.ScrolledText(win, wrap="word")
        txt.pack(fill="both", expand=True)
        txt.insert(
            "end",
            """\
WHAT THIS ESTIMATES
-------------------
The annual value of raising Net Promoter Score by one point, split into
revenue effects and cost effects.

Revenue Effects
• Retention: retention improvement % x customers x ARPP
• Share of Wallet: share of wallet increase % x customers x ARPP
• Referrals: referral increase % x customers x ARPP
• Premium Uptake: premium uptake increase % x customers x premium margin

Cost Effects
• CAC Savings: CAC reduction % x customer acquisition cost
• Service Cost Savings: service cost reduction % x customers x service cost per customer
• Operational Savings: operational efficiency % x operating costs

HOW TO USE
----------
• Edit any field; results and the chart update immediately.
• Impact assumptions are percentages: 0.5 means 0.5%.
• Total customers are entered in millions.
• Entries that are not numbers count as zero.
• Hover the ⓘ next to a field for its definition and estimation guidance.
• File → Export Results CSV writes the component table.
""",
        )
        txt.config(state="disabled")

    # ---------- Layout ----------
    def _build_banner(self) -> None:
        frm = ttk.LabelFrame(self, text=CASE_STUDY_TITLE)
        frm.pack(side=tk.TOP, fill=tk.X, padx=8, pady=6)
        ttk.Label(frm, text=CASE_STUDY_TEXT, wraplength=1040, justify="left").pack(
            fill=tk.X, padx=6, pady=4
        )

    def _build_inputs(self) -> None:
        container = ttk.Frame(self)
        container.pack(side=tk.TOP, fill=tk.X, padx=8, pady=6)
        for col, (title, fields) in enumerate(SECTIONS):
            container.grid_columnconfigure(col, weight=1)
            section = ttk.LabelFrame(container, text=title)
            section.grid(row=0, column=col, sticky="nsew", padx=(0, 6))
            section.grid_columnconfigure(2, weight=1)
            for row, field in enumerate(fields):
                ttk.Label(section, text=INPUT_LABELS[field]).grid(row=row, column=0, sticky="w")
                info = ttk.Label(section, text="ⓘ", foreground="#666666", cursor="question_arrow")
                info.grid(row=row, column=1, padx=4)
                self._tooltips.append(_Tooltip(info, field))
                var = tk.StringVar()
                var.trace_add("write", lambda *_, name=field: self._on_input_changed(name))
                ttk.Entry(section, textvariable=var, width=16).grid(
                    row=row, column=2, padx=6, pady=3, sticky="we"
                )
                self._input_vars[field] = var

    def _build_results(self) -> None:
        frm = ttk.LabelFrame(self, text="Results - Value of 1 Point NPS Increase")
        frm.pack(side=tk.TOP, fill=tk.X, padx=8, pady=6)
        for col, (group, names) in enumerate(RESULT_GROUPS):
            frm.grid_columnconfigure(col, weight=1)
            box = ttk.Frame(frm)
            box.grid(row=0, column=col, sticky="nw", padx=6, pady=4)
            ttk.Label(box, text=group, font=("TkDefaultFont", 10, "bold")).pack(anchor="w")
            for name in names:
                var = tk.StringVar()
                ttk.Label(box, textvariable=var).pack(anchor="w")
                self._result_vars[name] = var
        total = tk.StringVar()
        ttk.Label(frm, textvariable=total, font=("TkDefaultFont", 14, "bold")).grid(
            row=1, column=0, columnspan=len(RESULT_GROUPS), pady=(6, 4)
        )
        self._result_vars["totalValue"] = total

    def _build_chart(self) -> None:
        frm = ttk.Frame(self)
        frm.pack(side=tk.TOP, fill=tk.BOTH, expand=True, padx=8, pady=6)
        self.fig = Figure(figsize=(9, 3.5))
        self.ax = self.fig.add_subplot(111)
        self.canvas = FigureCanvasTkAgg(self.fig, master=frm)
        self.canvas.get_tk_widget().pack(fill=tk.BOTH, expand=True)

    # ---------- model sync ----------
    def _load_inputs(self) -> None:
        self._loading = True
        try:
            inputs = self.model.inputs
            for field, var in self._input_vars.items():
                var.set(format_number(to_display(field, inputs[field])))
        finally:
            self._loading = False

    def _on_input_changed(self, field: str) -> None:
        if self._loading:
            return
        self.model.set_input(field, from_display(field, self._input_vars[field].get()))
        self._refresh()

    def _refresh(self) -> None:
        results = self.model.results
        for name, var in self._result_vars.items():
            var.set(f"{COMPONENT_LABELS[name]}: {format_currency(results[name])}")
        self._draw_chart(results)

    def _draw_chart(self, results) -> None:
        ax = self.ax
        ax.clear()
        labels = [COMPONENT_LABELS[name] for name in COMPONENT_FIELDS]
        values = [results[name] for name in COMPONENT_FIELDS]
        revenue = set(RESULT_GROUPS[0][1])
        colors = [REVENUE_COLOR if name in revenue else COST_COLOR for name in COMPONENT_FIELDS]
        ax.barh(labels, values, color=colors)
        ax.invert_yaxis()
        ax.xaxis.set_major_formatter(lambda x, _pos: format_currency(x))
        ax.grid(True, axis="x")
        self.fig.tight_layout()
        self.canvas.draw_idle()

    # ---------- actions ----------
    def _reset(self) -> None:
        self.model.reset()
        self._load_inputs()
        self._refresh()

    def _export_results_csv(self):
        path = filedialog.asksaveasfilename(
            title="Export CSV",
            defaultextension=".csv",
            filetypes=[("CSV files", "*.csv")],
        )
        if not path:
            return
        try:
            export_results_csv(path, self.model.results)
        except OSError as exc:
            messagebox.showerror("Export", str(exc))
            return
        messagebox.showinfo("Export", f"CSV exported to {path}")


def run() -> None:
    App().mainloop()


__all__ = ["run", "App"]
