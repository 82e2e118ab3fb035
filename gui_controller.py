import time
import dearpygui.dearpygui as dpg

import constants


def _make_callbacks(shared):
    def count_cb(sender, app_data, user_data):
        shared['ball_count'] = int(app_data)
    def pause_cb():
        shared['toggle_pause'] = True
    def respawn_cb():
        shared['respawn'] = True
    def exit_cb():
        shared['__exit__'] = True
    return count_cb, pause_cb, respawn_cb, exit_cb


def status_line(shared):
    state = "paused" if shared.get('paused', False) else "running"
    line = f"{state}, balls={shared.get('balls_alive', 0)}, ticks={shared.get('ticks', 0)}"
    if shared.get('error'):
        line += f"\nlast respawn failed: {shared['error']}"
    return line


def run_gui(shared):
    """
    Run DearPyGui in its own process. Writes requests into `shared`; the
    host reads them once per frame and reports its status back.
    """
    dpg.create_context()

    count_cb, pause_cb, respawn_cb, exit_cb = _make_callbacks(shared)

    with dpg.window(label="Arena Controls", tag="controls_window", width=380, height=220):
        dpg.add_text("Balls to spawn on respawn")
        dpg.add_slider_int(label="Balls", tag="count_slider",
                           default_value=int(shared.get('ball_count', constants.N_BALL)),
                           min_value=0, max_value=300, callback=count_cb)
        dpg.add_separator()
        dpg.add_button(label="Pause / Resume", callback=lambda s, a, u: pause_cb())
        dpg.add_button(label="Respawn", callback=lambda s, a, u: respawn_cb())
        dpg.add_button(label="Exit", callback=lambda s, a, u: exit_cb())
        dpg.add_spacer()
        dpg.add_text("Status:", tag="status_label")
        dpg.add_text("", tag="status_text")

    dpg.create_viewport(title='Arena Controls', width=400, height=260)
    dpg.set_primary_window("controls_window", True)
    dpg.setup_dearpygui()
    dpg.show_viewport()

    try:
        while not shared.get('__exit__', False) and dpg.is_dearpygui_running():
            dpg.set_value("status_text", status_line(shared))
            dpg.render_dearpygui_frame()
            time.sleep(0.01)
    finally:
        dpg.destroy_context()


if __name__ == "__main__":
    from multiprocessing import Manager
    mgr = Manager()
    shared = mgr.dict()
    shared['ball_count'] = constants.N_BALL
    run_gui(shared)
