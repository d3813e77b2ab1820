from __future__ import annotations

import logging
from math import degrees
import tkinter as tk
from tkinter import ttk, messagebox

from proxplex.buffers import IndexBuffer, line_segments, triangle_polygons, vertex_array
from proxplex.complex import ProximityComplex
from proxplex.config import (
    DEFAULT_NUM_VERTICES, DEFAULT_RADIUS, DEFAULT_THRESHOLD, FRAME_INTERVAL_MS,
    LINE_COLOR, POINT_COLOR, TRIANGLE_COLOR,
)
from proxplex.controller import RotationState, ThresholdController
from proxplex.errors import ConstructionError
from proxplex.logging_config import setup_logging

import matplotlib
matplotlib.use("TkAgg")
from matplotlib.figure import Figure
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg
from mpl_toolkits.mplot3d import Axes3D  # noqa: F401  # потрібен для 'projection="3d"'
from mpl_toolkits.mplot3d.art3d import Line3DCollection, Poly3DCollection

logger = logging.getLogger("proxplex.viewer")


class ComplexViewer(tk.Tk):
    """
    Вікно з 3D-переглядом комплексу.
      ←/↓ і →/↑ — зменшити/збільшити поріг;
      drag лівою кнопкою — обертання.
    Кадр: after(FRAME_INTERVAL_MS) читає стан і перемальовує, якщо щось змінилось.
    """

    def __init__(self, n: int = DEFAULT_NUM_VERTICES, radius: float = DEFAULT_RADIUS):
        super().__init__()
        self.title("Proximity complex")
        self.geometry("700x760")

        self.cx = ProximityComplex(n=n, radius=radius, threshold=DEFAULT_THRESHOLD)
        self.thresholds = ThresholdController(self.cx)
        self.rotation = RotationState()

        self.fig = None
        self.ax = None
        self.canvas = None
        # (поріг, кути, комплекс) останнього намальованого кадру
        self._drawn = None

        self._build_widgets()
        self.bind("<Key>", self._on_key)
        self.after(FRAME_INTERVAL_MS, self._tick)

    def _build_widgets(self):
        main = ttk.Frame(self, padding=10)
        main.pack(fill="both", expand=True)

        # --- Параметри ---
        input_frame = ttk.LabelFrame(main, text="Хмара точок")
        input_frame.pack(fill="x", pady=5)

        ttk.Label(input_frame, text="Кількість точок (1..255):").grid(
            row=0, column=0, sticky="w", padx=5, pady=5
        )
        self.n_entry = ttk.Entry(input_frame, width=10)
        self.n_entry.insert(0, str(len(self.cx)))
        self.n_entry.grid(row=0, column=1, sticky="w", padx=5, pady=5)

        ttk.Label(input_frame, text="Радіус:").grid(row=0, column=2, sticky="w", padx=5, pady=5)
        self.r_entry = ttk.Entry(input_frame, width=10)
        self.r_entry.insert(0, str(DEFAULT_RADIUS))
        self.r_entry.grid(row=0, column=3, sticky="w", padx=5, pady=5)

        regen_btn = ttk.Button(input_frame, text="Згенерувати", command=self.regenerate)
        regen_btn.grid(row=0, column=4, sticky="w", padx=5, pady=5)

        # --- Стан ---
        result_frame = ttk.LabelFrame(main, text="Комплекс")
        result_frame.pack(fill="x", pady=5)

        self.threshold_var = tk.StringVar(value="—")
        self.edges_var = tk.StringVar(value="—")
        self.triangles_var = tk.StringVar(value="—")

        ttk.Label(result_frame, text="Поріг:").grid(row=0, column=0, sticky="w", padx=5, pady=2)
        ttk.Label(result_frame, textvariable=self.threshold_var).grid(row=0, column=1, sticky="w", padx=5, pady=2)

        ttk.Label(result_frame, text="Ребер:").grid(row=1, column=0, sticky="w", padx=5, pady=2)
        ttk.Label(result_frame, textvariable=self.edges_var).grid(row=1, column=1, sticky="w", padx=5, pady=2)

        ttk.Label(result_frame, text="Трикутників:").grid(row=2, column=0, sticky="w", padx=5, pady=2)
        ttk.Label(result_frame, textvariable=self.triangles_var).grid(row=2, column=1, sticky="w", padx=5, pady=2)

        info_label = ttk.Label(
            main,
            text="Стрілки ←/→ змінюють поріг, перетягування мишею обертає хмару.",
            foreground="gray",
            justify="center",
        )
        info_label.pack(fill="x", pady=5)

        # --- 3D ---
        plot_frame = ttk.LabelFrame(main, text="3D візуалізація")
        plot_frame.pack(fill="both", expand=True, pady=5)

        self.fig = Figure(figsize=(5, 5))
        self.ax = self.fig.add_subplot(111, projection="3d")
        # обертаємо самі (RotationState), вбудоване обертання matplotlib вимкнене
        self.ax.disable_mouse_rotation()
        self.canvas = FigureCanvasTkAgg(self.fig, master=plot_frame)
        self.canvas.get_tk_widget().pack(fill="both", expand=True)

        self.canvas.mpl_connect("button_press_event", self._on_press)
        self.canvas.mpl_connect("button_release_event", self._on_release)
        self.canvas.mpl_connect("motion_notify_event", self._on_motion)

    # ---------------- Введення ----------------
    def _on_key(self, event):
        self.thresholds.handle_key(event.keysym, editing=isinstance(event.widget, tk.Entry))

    def _on_press(self, event):
        if event.button == 1:
            self.rotation.press(event.x, event.y)

    def _on_release(self, event):
        if event.button == 1:
            self.rotation.release()

    def _on_motion(self, event):
        # y у matplotlib росте вгору, у вікні — вниз
        self.rotation.move(event.x, -event.y)

    def regenerate(self):
        try:
            n = int(self.n_entry.get())
            radius = float(self.r_entry.get())
        except ValueError:
            messagebox.showerror("Помилка", "Кількість — ціле число, радіус — число.")
            return
        try:
            cx = ProximityComplex(n=n, radius=radius, threshold=self.cx.current_threshold())
        except ConstructionError as e:
            messagebox.showerror("Помилка", str(e))
            return
        logger.info("Regenerated: %d points, R=%g", n, radius)
        self.cx = cx
        self.thresholds = ThresholdController(cx)
        self._drawn = None

    # ---------------- Кадр ----------------
    def _tick(self):
        key = (self.cx.current_threshold(), self.rotation.angles, id(self.cx))
        if key != self._drawn:
            self.draw()
            self._drawn = key
        self.after(FRAME_INTERVAL_MS, self._tick)

    def draw(self):
        self.ax.clear()

        verts = vertex_array(self.cx.vertices())
        buf = IndexBuffer.from_complex(self.cx)

        # трикутники знизу, потім точки, потім лінії
        if buf.triangle_count:
            self.ax.add_collection3d(Poly3DCollection(
                triangle_polygons(verts, buf), facecolors=[TRIANGLE_COLOR], edgecolors="none",
            ))
        self.ax.scatter(verts[:, 0], verts[:, 1], verts[:, 2], s=4, color=[POINT_COLOR])
        if buf.edge_count:
            self.ax.add_collection3d(Line3DCollection(
                line_segments(verts, buf), colors=[LINE_COLOR], linewidths=0.5,
            ))

        a, b = self.rotation.angles
        # a — навколо вертикальної осі, b — нахил
        self.ax.view_init(elev=30 + degrees(b), azim=-60 + degrees(a))

        lim = max(0.5, float(abs(verts).max()) if len(verts) else 0.5)
        self.ax.set_xlim(-lim, lim)
        self.ax.set_ylim(-lim, lim)
        self.ax.set_zlim(-lim, lim)
        self.ax.set_axis_off()

        self.threshold_var.set(f"{self.cx.current_threshold():.3f}")
        self.edges_var.set(str(buf.edge_count))
        self.triangles_var.set(str(buf.triangle_count))

        self.canvas.draw_idle()


if __name__ == "__main__":
    setup_logging(level=logging.INFO)
    app = ComplexViewer()
    app.mainloop()
