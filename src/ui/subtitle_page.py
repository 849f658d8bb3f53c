"""NiceGUI subtitle page: extract SRT from a video and translate it."""

from nicegui import events, ui

from src.models.schemas import AppTab, TargetLanguage
from src.ui.api_client import SubtitleSession
from src.utils.file_utils import (
    DOWNLOAD_MEDIA_TYPE,
    SRT_FILENAME,
    TXT_FILENAME,
    download_payload,
    translated_filename,
)

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600;700&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    body { background: #f8fafc; min-height: 100vh; }

    .panel {
        background: white;
        border: 1px solid #f1f5f9;
        border-radius: 16px;
        box-shadow: 0 1px 2px rgba(0, 0, 0, 0.05);
    }

    .header { background: white; border-bottom: 1px solid #e2e8f0; }

    .brand {
        background: linear-gradient(90deg, #4f46e5 0%, #7c3aed 100%);
        -webkit-background-clip: text;
        color: transparent;
    }

    .srt-output textarea {
        font-family: 'Menlo', 'Monaco', monospace !important;
        font-size: 0.85rem;
    }
</style>
"""

LANGUAGE_OPTIONS = {lang: lang.value for lang in TargetLanguage}


@ui.page("/")
def subtitle_page() -> None:
    """Main subtitle page."""
    ui.add_head_html(CUSTOM_CSS)
    session = SubtitleSession()

    def download(content: str, filename: str) -> None:
        ui.download.content(download_payload(content), filename, DOWNLOAD_MEDIA_TYPE)

    async def handle_upload(e: events.UploadEventArguments) -> None:
        content = await e.file.read()
        session.set_upload(e.file.name, e.file.content_type, content)
        size_mb = len(content) / (1024 * 1024)
        upload_label.set_text(f"{e.file.name} ({size_mb:.2f} MB)")

    # === Loading overlay ===
    with ui.dialog().props("persistent") as loading_dialog, ui.card().classes(
        "items-center p-8 gap-3"
    ):
        ui.spinner(size="3em", color="indigo")
        ui.label().bind_text_from(session, "status", lambda s: s.message).classes(
            "text-lg font-semibold text-slate-800"
        )
        ui.label("Vui lòng đợi trong giây lát...").classes("text-sm text-slate-500 italic")
    loading_dialog.bind_value_from(session, "status", lambda s: s.loading)

    # === Header ===
    with ui.row().classes("w-full header px-6 h-16 items-center justify-between"):
        with ui.row().classes("items-center gap-2"):
            ui.icon("movie").classes("text-indigo-600 text-2xl")
            ui.label("Gemini SRT Pro").classes("text-xl font-bold brand")
        ui.label("Powered by Gemini 3 Flash").classes(
            "text-xs uppercase text-slate-400 bg-slate-100 px-3 py-1 rounded-full"
        )

    with ui.column().classes("w-full max-w-6xl mx-auto p-4 md:p-8 gap-6"):
        with ui.tabs().bind_value(session, "active_tab") as tabs:
            ui.tab(AppTab.EXTRACT.value, label="Trích xuất SRT")
            ui.tab(AppTab.TRANSLATE.value, label="Dịch phụ đề")

        with ui.tab_panels(tabs, value=session.active_tab).classes(
            "w-full bg-transparent"
        ):
            # === Extract tab ===
            with ui.tab_panel(AppTab.EXTRACT.value), ui.grid(columns=2).classes("w-full gap-8"):
                with ui.column().classes("panel p-6 gap-4"):
                    ui.label("1. Tải lên Video").classes("text-lg font-bold text-slate-800")
                    ui.upload(on_upload=handle_upload, auto_upload=True, max_files=1).props(
                        "accept=video/* flat bordered"
                    ).classes("w-full")
                    upload_label = ui.label("Hỗ trợ MP4, MKV, MOV...").classes(
                        "text-xs text-slate-500"
                    )
                    ui.button(
                        "Bắt đầu Trích xuất", icon="science", on_click=session.extract
                    ).bind_enabled_from(session, "can_extract").classes("w-full")

                with ui.column().classes("panel p-6 gap-4"):
                    with ui.row().classes("w-full items-center justify-between"):
                        ui.label("2. Kết quả SRT").classes("text-lg font-bold text-slate-800")
                        with ui.row().classes("gap-2").bind_visibility_from(
                            session, "extracted_srt"
                        ):
                            ui.button(
                                "Tải .SRT",
                                on_click=lambda: download(session.extracted_srt, SRT_FILENAME),
                            ).props("outline size=sm")
                            ui.button(
                                "Tải .TXT",
                                on_click=lambda: download(session.extracted_srt, TXT_FILENAME),
                            ).props("outline size=sm color=grey")
                    ui.textarea(placeholder="Phụ đề trích xuất sẽ hiện ở đây").bind_value(
                        session, "extracted_srt"
                    ).props("outlined rows=14").classes("w-full srt-output")

            # === Translate tab ===
            with ui.tab_panel(AppTab.TRANSLATE.value), ui.grid(columns=2).classes("w-full gap-8"):
                with ui.column().classes("panel p-6 gap-4"):
                    ui.label("1. Phụ đề gốc").classes("text-lg font-bold text-slate-800")
                    ui.textarea(
                        placeholder="Dán nội dung SRT tại đây hoặc trích xuất từ tab bên cạnh..."
                    ).bind_value(session, "extracted_srt").props("outlined rows=18").classes(
                        "w-full srt-output"
                    )

                with ui.column().classes("panel p-6 gap-4"):
                    with ui.row().classes("w-full items-center justify-between"):
                        ui.label("2. Bản dịch").classes("text-lg font-bold text-slate-800")
                        ui.button(
                            "Tải về",
                            on_click=lambda: download(
                                session.translated_srt,
                                translated_filename(session.target_language.value),
                            ),
                        ).props("outline size=sm").bind_visibility_from(
                            session, "translated_srt"
                        )
                    with ui.row().classes("w-full items-end gap-4"):
                        ui.select(LANGUAGE_OPTIONS, label="Dịch sang").bind_value(
                            session, "target_language"
                        ).classes("flex-1")
                        ui.button("Dịch ngay", on_click=session.translate).props(
                            "color=deep-purple"
                        ).bind_enabled_from(session, "can_translate").classes("flex-1")
                    ui.textarea(placeholder="Chưa có bản dịch").bind_value_from(
                        session, "translated_srt"
                    ).props("outlined readonly rows=14").classes("w-full srt-output")

        # === Error banner ===
        with ui.row().classes(
            "w-full p-4 bg-red-50 border border-red-100 rounded-xl items-center gap-3"
        ).bind_visibility_from(session, "status", lambda s: bool(s.error)):
            ui.icon("error_outline").classes("text-red-600")
            ui.label().bind_text_from(session, "status", lambda s: s.error or "").classes(
                "text-sm font-medium text-red-600"
            )

    with ui.row().classes("w-full justify-center py-6 border-t bg-white"):
        ui.label(
            "© 2024 Gemini SRT Pro. Ứng dụng AI hỗ trợ xử lý phụ đề thông minh."
        ).classes("text-xs text-slate-400")


def main() -> None:
    ui.run(title="Gemini SRT Pro", port=8080, reload=False)


if __name__ == "__main__":
    main()
