"""Instruction text sent with each model request."""

EXTRACTION_INSTRUCTION = """Bạn là một chuyên gia trích xuất phụ đề. Hãy nghe âm thanh từ video này và tạo ra một file phụ đề định dạng .srt hoàn chỉnh.
Yêu cầu:
1. Sử dụng định dạng SRT chuẩn:
   Số thứ tự
   00:00:00,000 --> 00:00:00,000
   Nội dung text
2. Trích xuất chính xác ngôn ngữ được nói trong video.
3. Đảm bảo các mốc thời gian khớp với lời nói.
4. Chỉ trả về nội dung file SRT, không thêm bất kỳ văn bản giải thích nào khác."""

TRANSLATION_TEMPLATE = """Bạn là một biên dịch viên chuyên nghiệp. Hãy dịch nội dung file SRT sau đây sang {target_lang}.
Yêu cầu:
1. Giữ nguyên định dạng SRT (chỉ số, mốc thời gian).
2. Dịch sát nghĩa và mượt mà văn phong của ngôn ngữ đích.
3. Tuyệt đối KHÔNG thay đổi các mốc thời gian.
4. Chỉ trả về nội dung file SRT đã dịch, không thêm văn bản dẫn nhập.

Nội dung SRT gốc:
{srt_content}"""


def build_translation_prompt(srt_content: str, target_lang: str) -> str:
    """Fill the translation template with the target language and SRT text."""
    return TRANSLATION_TEMPLATE.format(target_lang=target_lang, srt_content=srt_content)
